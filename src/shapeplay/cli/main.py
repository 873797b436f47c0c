"""shapeplay CLI.

Command-line entry points for inspecting the canvas engine without a
host UI: everything runs on the in-memory recording backend.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer

from shapeplay import __version__
from shapeplay.geometry import Point, Rect
from shapeplay.rendering import RecordingBackend
from shapeplay.scene import Canvas, Circle, TouchEvent, TouchPhase
from shapeplay.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="shapeplay",
    help="shapeplay: a retained-mode 2D canvas with draggable shapes",
    add_completion=False,
)

_DEMO_TOUCH_ID = 1


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"shapeplay {__version__}")


@app.command()
def demo(
    width: Annotated[
        float, typer.Option("--width", min=1.0, help="Viewport width in screen points")
    ] = 300.0,
    height: Annotated[
        float, typer.Option("--height", min=1.0, help="Viewport height in screen points")
    ] = 300.0,
    radius: Annotated[
        float, typer.Option("--radius", "-r", min=0.0, help="Circle radius in model units")
    ] = 5.0,
    drag_to: Annotated[
        tuple[float, float],
        typer.Option("--drag-to", help="Model point to drag the circle's center to"),
    ] = (0.0, 0.0),
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Drag a circle across a headless canvas and print where it ends up."""
    _configure_logging(verbose)
    logger = get_logger(__name__)

    canvas = Canvas(RecordingBackend(), viewport=Rect(width=width, height=height))
    circle = Circle(canvas, radius=radius)
    circle.draggable = True
    logger.info("Demo canvas ready", width=width, height=height, radius=radius)

    target = Point(x=drag_to[0], y=drag_to[1])
    start = canvas.coordinates.to_screen(circle.center)
    end = canvas.coordinates.to_screen(target)
    for phase, location in (
        (TouchPhase.BEGAN, start),
        (TouchPhase.MOVED, end),
        (TouchPhase.ENDED, end),
    ):
        canvas.dispatch_touches(
            [TouchEvent(touch_id=_DEMO_TOUCH_ID, phase=phase, location=location)]
        )

    visible = canvas.visible_size
    if json_output:
        frame = circle.frame
        typer.echo(
            json.dumps(
                {
                    "radius": circle.radius,
                    "center": {"x": circle.center.x, "y": circle.center.y},
                    "scale": circle.scale,
                    "rotation": circle.rotation,
                    "frame": {
                        "x": frame.x,
                        "y": frame.y,
                        "width": frame.width,
                        "height": frame.height,
                    },
                    "visible_size": {"width": visible.width, "height": visible.height},
                }
            )
        )
    else:
        typer.echo(circle.quick_look())
        typer.echo(f"Center: {circle.center.quick_look()}")
        typer.echo(f"Visible size: {visible.width} x {visible.height}")


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:
        level = "DEBUG"

    configure_logging(level=level)


def main() -> None:
    """Console script entry point."""
    app()
