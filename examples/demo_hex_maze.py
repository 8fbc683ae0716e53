import matplotlib.pyplot as plt
from pyhybridmaze import HexGrid, Hybrid, plot_maze

grid = HexGrid(30, 20)
edges = grid.shuffled_edges(seed=0)

fig, axes = plt.subplots(1, 3, figsize=(15, 5))
for ax, threshold in zip(axes, [0.0, 0.5, 1.0]):
    maze = list(Hybrid(edges, threshold=threshold, seed=0))
    plot_maze(grid, maze, ax=ax, title=f"threshold = {threshold}", show_cells=False)

plt.show()
