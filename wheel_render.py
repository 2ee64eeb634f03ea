import html

from wheel_geometry import (
    HIGHLIGHT_STROKE,
    HIGHLIGHT_STROKE_WIDTH,
    LABEL_FONT_SIZE,
    LABEL_RADIUS,
    build_slices,
    slice_path,
)
from wheel_spin import SPIN_DURATION_MS

WHEEL_SIZE = 340
EASING = "cubic-bezier(0.1, 0.05, 0.01, 1.0)"
GLOW = "drop-shadow(0 0 8px rgba(16,185,129,0.6))"


def render_slice(wheel_slice, single=False):
    if wheel_slice.highlighted:
        stroke = f'stroke="{HIGHLIGHT_STROKE}" stroke-width="{HIGHLIGHT_STROKE_WIDTH}"'
        style = f"transition: stroke-width 300ms, filter 300ms; filter: {GLOW};"
    else:
        stroke = 'stroke="none" stroke-width="0"'
        style = "transition: stroke-width 300ms, filter 300ms; filter: none;"

    # A lone option covers the full turn and its arc path collapses to a point.
    if single:
        shape = f'<circle cx="0" cy="0" r="1" fill="{wheel_slice.fill}" {stroke} style="{style}" />'
    else:
        shape = (
            f'<path d="{slice_path(wheel_slice.start, wheel_slice.end)}" '
            f'fill="{wheel_slice.fill}" {stroke} style="{style}" />'
        )

    label = (
        f'<text x="{LABEL_RADIUS}" y="0" fill="{wheel_slice.text_color}" '
        f'font-size="{LABEL_FONT_SIZE}" font-weight="bold" text-anchor="middle" '
        f'dominant-baseline="middle" transform="rotate({wheel_slice.mid_degrees:.4f})">'
        f"{html.escape(wheel_slice.label)}</text>"
    )
    return f"<g>{shape}{label}</g>"


def render_wheel_svg(options, winning_index=None):
    slices = build_slices(options, winning_index)
    single = len(slices) == 1
    body = "".join(render_slice(wheel_slice, single=single) for wheel_slice in slices)
    return (
        '<svg viewBox="-1 -1 2 2" width="100%" height="100%" '
        'style="transform: rotate(-90deg); pointer-events: none;">'
        f"{body}</svg>"
    )


def render_wheel_html(options, rotation, from_rotation=None, animate=False,
                      duration_ms=SPIN_DURATION_MS, winning_index=None, spin_key=0):
    wheel_id = f"wheel-{spin_key}-{len(options)}"
    svg = render_wheel_svg(options, winning_index)
    start_rotation = rotation if from_rotation is None or not animate else from_rotation
    status = "Spinning..." if animate else "Ready to spin"
    animate_js = "true" if animate else "false"

    return f"""
        <div style="display:flex; flex-direction:column; align-items:center; gap:8px;">
            <div style="position:relative; width:{WHEEL_SIZE}px; height:{WHEEL_SIZE}px;">
                <div style="position:absolute; top:-2px; left:50%; transform:translateX(-50%); width:0; height:0;
                                        border-left:14px solid transparent; border-right:14px solid transparent;
                                        border-top:22px solid #111827; z-index:10;"></div>
                <div id="{wheel_id}" style="width:100%; height:100%; border-radius:50%; overflow:hidden;
                                        box-shadow:0 20px 25px -5px rgba(0,0,0,0.25);
                                        transform:rotate({start_rotation}deg);">
                    {svg}
                </div>
                <div style="position:absolute; top:50%; left:50%; transform:translate(-50%, -50%);
                                        width:64px; height:64px; border-radius:50%; background:#1F2937;
                                        display:flex; align-items:center; justify-content:center;
                                        color:#ffffff; font:900 13px sans-serif; letter-spacing:0.1em; z-index:20;">SPIN</div>
            </div>
            <div style="font-size:13px; color:#6B7280;">{status}</div>
        </div>

        <script>
            (function() {{
                const wheel = document.getElementById("{wheel_id}");
                const animate = {animate_js};
                if (!animate) return;
                requestAnimationFrame(function() {{
                    requestAnimationFrame(function() {{
                        wheel.style.transition = "transform {int(duration_ms)}ms {EASING}";
                        wheel.style.transform = "rotate({rotation}deg)";
                    }});
                }});
            }})();
        </script>
        """
