from pyhybridmaze import HexGrid, hybrid_spanning_tree, plot_maze_plotly

grid = HexGrid(25, 25)
maze = hybrid_spanning_tree(grid.shuffled_edges(seed=3), threshold=0.2, seed=3)

fig = plot_maze_plotly(grid, maze, title="Hex maze (threshold 0.2)")
fig.show()
