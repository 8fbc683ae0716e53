import matplotlib.pyplot as plt
from pyhybridmaze.HexGrid import HexGrid
from pyhybridmaze.Edge import EdgeLike
from typing import Any, Iterable, Optional
from matplotlib.axes import Axes
import numpy as np
import plotly.graph_objects as go


def plot_polygon_edges(
    edges: Iterable,
    ax: Axes,
    line_color: str = "b",
    line_width: float = 1.0,
):
    """
    Plot a set of line segments on a 2D Matplotlib axis.

    Parameters
    ----------
    edges : Iterable
        Pairs of points (each a coordinate array), one pair per segment.
    ax : matplotlib.axes.Axes
        A Matplotlib Axes object to plot on.
    line_color : str, optional
        Color of the segments, by default 'b'.
    line_width : float, optional
        Width of the segment lines, by default 1.0.
    """
    for p1, p2 in edges:
        ax.plot(
            [p1[0], p2[0]],
            [p1[1], p2[1]],
            linestyle="-",
            color=line_color,
            linewidth=line_width,
        )


def plot_hex_cells(
    grid: HexGrid,
    ax: Axes,
    line_width: float = 0.5,
    line_color: Any = "lightgrey",
):
    """
    Draw the outline of every cell of a hex grid.

    Parameters
    ----------
    grid : HexGrid
        The grid whose cells are drawn.
    ax : matplotlib.axes.Axes
        Axis to draw on.
    line_width : float, optional
        Width of the outlines, by default 0.5.
    line_color : Any, optional
        Color of the outlines, by default 'lightgrey'.
    """
    for cell in grid.nodes:
        corners = grid.corners(cell)
        closed = np.vstack([corners, corners[:1]])
        ax.plot(closed[:, 0], closed[:, 1], color=line_color, linewidth=line_width)


def plot_maze(
    grid: HexGrid,
    edges: Iterable[EdgeLike],
    ax: Optional[Axes] = None,
    title: str = "Hex Maze",
    show_cells: bool = True,
    line_width: float = 2.0,
    line_color: Any = "k",
):
    """
    Plot the passages of a maze over a hex grid using Matplotlib.

    Parameters
    ----------
    grid : HexGrid
        The grid the maze was carved from.
    edges : Iterable[EdgeLike]
        Passages, each joining two adjacent cells.
    ax : matplotlib.axes.Axes, optional
        An optional Matplotlib axis to plot on. A new figure is created if None.
    title : str, optional
        Title of the plot. Default is "Hex Maze".
    show_cells : bool, optional
        Draw the cell outlines underneath the passages. Default is True.
    line_width : float, optional
        Width of the passage lines, by default 2.0.
    line_color : Any, optional
        Color of the passage lines, by default 'k'.

    Returns
    -------
    matplotlib.axes.Axes
        The axis used for plotting.
    """

    if ax is None:
        fig, ax = plt.subplots()
    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")

    if show_cells:
        plot_hex_cells(grid, ax)
    plot_polygon_edges(
        [grid.segment(edge) for edge in edges],
        ax,
        line_width=line_width,
        line_color=line_color,
    )
    return ax


def plot_maze_plotly(
    grid: HexGrid,
    edges: Iterable[EdgeLike],
    fig: Optional[go.Figure] = None,
    title: str = "Hex Maze",
    marker_size: float = 4,
    marker_color: Any = "black",
    line_width: float = 3,
    line_color: Any = "black",
):
    """
    Plot the passages of a maze over a hex grid using Plotly.

    Parameters
    ----------
    grid : HexGrid
        The grid the maze was carved from.
    edges : Iterable[EdgeLike]
        Passages, each joining two adjacent cells.
    fig : plotly.graph_objects.Figure, optional
        Existing figure to add to. A new one is created if None.
    title : str, optional
        Title of the plot. Default is "Hex Maze".
    marker_size : float, optional
        Size of the cell-centre markers. Default is 4.
    marker_color : Any, optional
        Color of the cell-centre markers. Default is "black".
    line_width : float, optional
        Width of the passage lines. Default is 3.
    line_color : Any, optional
        Color of the passage lines. Default is "black".

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    if fig is None:
        fig = go.Figure()

    # one trace for all passages, segments separated by None
    xs, ys = [], []
    for edge in edges:
        (x0, y0), (x1, y1) = grid.segment(edge)
        xs.extend([x0, x1, None])
        ys.extend([y0, y1, None])
    fig.add_trace(go.Scatter(
        x=xs, y=ys,
        mode='lines',
        line=dict(color=line_color, width=line_width),
        name='Passages'
    ))

    pts = grid.centers
    fig.add_trace(go.Scatter(
        x=pts[:, 0], y=pts[:, 1],
        mode='markers',
        marker=dict(size=marker_size, color=marker_color),
        name='Cells'
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(showgrid=False, visible=False),
        yaxis=dict(showgrid=False, visible=False, scaleanchor="x"),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig
