import numpy as np
import plotly.graph_objects as go
from pyhybridmaze import HexGrid, hybrid_spanning_tree, maze_statistics

grid = HexGrid(40, 40)
thresholds = np.linspace(0.0, 1.0, 11)

ratios = []
for threshold in thresholds:
    runs = [
        maze_statistics(
            hybrid_spanning_tree(grid.shuffled_edges(seed=s), threshold, seed=s)
        )["dead_end_ratio"]
        for s in range(5)
    ]
    ratios.append(np.mean(runs))

fig = go.Figure(go.Scatter(x=thresholds, y=ratios, mode="lines+markers"))
fig.update_layout(
    title="Dead ends vs. threshold",
    xaxis_title="threshold",
    yaxis_title="dead-end ratio",
)
fig.show()
