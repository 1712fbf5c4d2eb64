import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

from hullsim.geometry import as_array

EVENT_STYLES = {
    "part_of_hull": dict(color="C3", linewidth=2.0, zorder=3),
    "temporary": dict(color="C7", linewidth=0.8, alpha=0.5, zorder=2),
}


def plot_hull(points, hull, ax=None, title=None):
    """
    Scatter of the points with the closed hull boundary drawn over them.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))

    df = pd.DataFrame(as_array(points), columns=["x", "y"])
    sns.scatterplot(df, x="x", y="y", color="C0", s=12, legend=False, ax=ax)

    vertices = as_array(hull)
    closed = pd.concat([pd.DataFrame(vertices), pd.DataFrame(vertices[:1])])
    ax.plot(closed[0], closed[1], color="C3", linewidth=2.0)
    ax.set_aspect("equal")
    if title is not None:
        ax.set_title(title)
    return ax


def plot_event_log(file_prefix, frame=None, ax=None):
    """
    Replays `<file_prefix>-events.csv` up to and including `frame`.

    Temporary edges are only shown for the last replayed frame, mirroring an
    animation where candidates are cleared at every step. The last comment of
    that frame becomes the title.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))

    df = pd.read_csv(file_prefix + "-events.csv", header=0, keep_default_na=False)
    for column in ("x0", "y0", "x1", "y1"):
        df[column] = pd.to_numeric(df[column], errors="coerce")
    if frame is None:
        frame = df["frame"].max()
    # the last clear screen at or before `frame` starts the visible history
    clears = df.loc[(df.kind == "clear_screen") & (df.frame <= frame), "frame"]
    first = clears.max() if len(clears) else 0
    df = df[(df.frame >= first) & (df.frame <= frame)]

    for kind, style in EVENT_STYLES.items():
        edges = df[df.kind == kind]
        if kind == "temporary":
            edges = edges[edges.frame == frame]
        for row in edges.itertuples():
            ax.plot([row.x0, row.x1], [row.y0, row.y1], **style)

    for row in df[df.kind == "vertical_line"].itertuples():
        ax.axvline(row.x0, color="C2", linestyle="--", linewidth=0.8)

    comments = df[(df.kind == "text_comment") & (df.frame == frame)]
    if len(comments):
        ax.set_title(comments.text.iloc[-1], fontsize="small")
    return ax


def plot_hull_log(file_prefix, ax=None):
    """
    Scatter of the hull vertices written to `<file_prefix>-hull.csv`.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))
    df = pd.read_csv(file_prefix + "-hull.csv", header=0)
    sns.scatterplot(df, x="x", y="y", color="C3", legend=False, ax=ax)
    return ax


# facilitates avoiding duplicate matplotlib import on scripts which import these functions
# i.e. `import plotting as p; p.plot_hull(...); p.show()``
show = plt.show
