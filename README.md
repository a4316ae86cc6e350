# quadkit

quadkit is a small 2D graphics toolkit that needs no GPU. Drawing calls turn
shapes into vertex and index data on a `Canvas`. Images, sprite atlases, frame
profiling and immediate-mode UI state are all plain Python objects, so you can
inspect them, test them, or pass the results to any renderer.

## Installation

```
pip install quadkit
```

To run the test suite:

```
pip install "quadkit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `quadkit.primitives` | `Vec2`, `Rect`, `Color`, and the colour constants `WHITE`, `BLACK`, `BLANK` |
| `quadkit.clock` | `Clock`: last frame time, FPS, time elapsed since creation |
| `quadkit.image` | `Image`: RGBA pixels in memory, blending, PNG export; `load_image` |
| `quadkit.atlas` | `Atlas`, `Sprite`, `FilterMode`: packs sprites into one image that grows when full |
| `quadkit.shapes` | `Canvas`, `Vertex`, `DrawCall`, `DrawMode`, `DrawRectangleParams` |
| `quadkit.telemetry` | `Profiler`, `Frame`, `Zone`, `DrawCallTelemetry` |
| `quadkit.ui_input` | `UiInput`, `InputCharacter`, `KeyCode` |
| `quadkit.tab_selector` | `TabSelector`: moves focus between widgets with Tab and Shift+Tab |
| `quadkit.ui_window` | `UiWindow`, `RectOffset` |
| `quadkit.ui_storage` | `AnyStorage`, `DragState`, `Drag` |
| `quadkit.windows` | `WindowManager`: windows, focus order, hovering, moving and input |

## Drawing shapes

```python
from quadkit.primitives import Color
from quadkit.shapes import Canvas, DrawRectangleParams

canvas = Canvas()
red = Color.from_rgba(255, 0, 0, 255)

canvas.draw_rectangle(10, 10, 100, 50, red)
canvas.draw_circle(200, 100, 30, red)
canvas.draw_line(0, 0, 50, 50, 2.0, red)
canvas.draw_rectangle_ex(50, 50, 20, 10, DrawRectangleParams(rotation=0.5, color=red))

for call in canvas.draw_calls:
    print(call.mode, len(call.vertices), len(call.indices))
```

Each drawing call appends a `DrawCall` to `canvas.draw_calls`. A `DrawCall`
holds its vertices (position, texture coordinates and colour) and its triangle
indices. Circles and ellipses are drawn as 20-sided polygons. `draw_poly` and
`draw_poly_lines` accept between 1 and 255 sides and raise `ValueError`
outside that range. A line of zero length or zero thickness draws nothing.

## Images

```python
from quadkit.image import Image
from quadkit.primitives import Color, Rect

img = Image.gen_image_color(4, 4, Color(1.0, 1.0, 1.0, 1.0))
img.set_pixel(1, 2, Color(0.0, 0.0, 1.0, 1.0))
corner = img.sub_image(Rect(0, 0, 2, 2))
img.export_png("out.png")
```

- `Image.from_file_with_format(data, format)` and `load_image(path)` decode
  PNG, TGA and the other formats Pillow can read. Data that cannot be decoded
  raises `ValueError`.
- `export_png` flips the image vertically before it writes the file.
- `blend` adds two images and saturates the result.
- `overlay` puts one image over the other. A fully transparent overlay leaves
  the original unchanged.

Both `blend` and `overlay` raise `ValueError` when the two images have
different pixel counts. Reading or writing a pixel outside the image raises
`IndexError`.

## Atlases

```python
from quadkit.atlas import Atlas

atlas = Atlas()                     # 512x512 by default
key = atlas.new_unique_id()
atlas.cache_sprite(key, corner)
print(atlas.get(key).rect, atlas.get_uv_rect(key))
```

Sprites are packed row by row with a 2-pixel gap between them. When the next
sprite does not fit, the atlas doubles in both dimensions and places every
sprite again.

## Frame timing

```python
from quadkit.clock import Clock

clock = Clock()
clock.tick(0.016)
print(clock.get_fps(), clock.get_frame_time(), clock.get_time())
```

## Profiling

```python
from quadkit.telemetry import Profiler

profiler = Profiler()
profiler.enable()
profiler.reset(0.016)        # the enable request applies at the frame boundary

with profiler.zone("update"):
    with profiler.zone("physics"):
        pass

profiler.reset(0.016)
print(profiler.frame().zones[0].children[0].name)   # "physics"
```

- `reset` raises `RuntimeError` if a zone is still open.
- `log_time(name)` is a context manager that logs
  `"Time query: <name>, <seconds>s"`. You can read the logged lines back from
  `strings()`.
- After `capture_frame()` and the next `reset`, the profiler clears the draw
  calls recorded with `track_drawcall` and starts capturing again. Read the
  calls back from `drawcalls()`.

## UI state

`WindowManager` keeps the state of an immediate-mode UI:

- the windows and their focus order
- which window is under the pointer
- moving windows by their title bars
- the keyboard input buffer
- per-widget storage (`storage_any`, `get_bool`)

Each frame, use it like this:

1. Send it input events: `mouse_down`, `mouse_up`, `mouse_move`,
   `mouse_wheel`, `char_event`, `key_down`.
2. Open and close windows with `begin_window`/`end_window` (and
   `begin_modal`/`end_modal`).
3. Ask `render_order()` which windows to draw, in which order and at which
   offset.
4. Finish with `new_frame(delta)`.

```python
from quadkit.primitives import Vec2
from quadkit.windows import WindowManager

ui = WindowManager(800, 600)
ui.begin_window(1, None, Vec2(10, 10), Vec2(200, 100))
ui.end_window()
ui.new_frame(0.016)
print(ui.render_order())
```

## What it does not do

quadkit does not open a window, talk to a GPU or put pixels on a screen. A
`Canvas` only collects geometry, and drawing it is left to you.

There is no font loading, glyph rasterising or text layout. There is no GPU
texture handling and no drawing of textured quads.

The UI part keeps window and input state only. It has no widgets, skins or
styling. The clipboard is a plain string attribute of `WindowManager`: Ctrl+C
and Ctrl+X copy `clipboard_selection` into it, and it is not connected to the
system clipboard.