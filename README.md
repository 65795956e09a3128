# xdogflow

Building blocks for flow-guided image stylization with the eXtended
difference-of-Gaussians (XDoG). The package provides:

- small-vector math
- typed pixel images with clamped and bilinear sampling
- structure-tensor analysis
- streamline tracing along the tangent field
- conversion to and from Pillow
- the parameter set that drives an XDoG stylization pipeline

## Installation

```
pip install xdogflow
```

To run the tests, install the `test` extra and run pytest:

```
pip install "xdogflow[test]"
pytest
```

## Modules

### `xdogflow.vecmath`

`Vector` is an immutable tuple of 1 to 4 numbers. It has `x`, `y`, `z` and
`w` properties, `splat`, `extend` and `truncate`. Arithmetic works component
by component, and a plain number on either side applies to every component.

The module also has these helpers: `lerp`, `clamp`, `smoothstep`, `fract`,
`sign`, `radians`, `degrees`, `dot`, `length`, `normalize` (raises
`ZeroDivisionError` for a zero vector), `reflect`, `cross`, `vfloor`,
`vabs`, `vmin` and `vmax`.

### `xdogflow.image`

`Image` holds pixels of one `PixelType`: `UCHAR`, `UCHAR2`, `UCHAR4`,
`FLOAT`, `FLOAT2` or `FLOAT4`. The pixel data is a NumPy array shaped
`(height, width[, channels])`.

Ways to read and write pixels:

| Access | Coordinates | Behaviour |
| --- | --- | --- |
| `image.pixel(x, y)` | truncated and clamped to the image | returns a number or a `Vector` |
| `image[x, y]` | must lie inside the image | reads or writes a pixel; raises `IndexError` outside |
| `image[y]` | must lie inside the image | gives row `y` as a writable NumPy view |
| `image.sample_linear(x, y)` | pixel centres at half-integer coordinates | bilinear interpolation |

Other members of `Image`:

- `width`, `height`, `size`, `channels`
- `pitch`: bytes per row
- `is_valid`: false when width or height is zero
- `to_array`, `copy`, `zero`
- `grid(block)`: how many tiles of the given size cover the image

`Sampler` reads an image in one of two `FilterMode`s: `POINT` or `LINEAR`.

### `xdogflow.cache`

`AllocationCache` keeps freed `Block`s and hands them out again for requests
of the same width and height. `size` counts the bytes held in cached blocks.
`total` counts the bytes of all blocks that have been allocated and not
cleared.

### `xdogflow.structure_tensor`

A structure tensor is stored as `(E, G, F[, unused])`. The module has:

- `st_angle`, `st_tangent` and `st_gradient`: directions from the tensor
- `st_lambda`: the eigenvalues
- `st_tfm`: the tangent plus both eigenvalues
- `st_anisotropy` and `tfm_anisotropy`: the anisotropy
- `st_lfm`: a local frame with stretch factors

### `xdogflow.streamline`

`integrate_euler`, `integrate_rk2` and `integrate_rk4` trace a streamline in
both directions through a tensor field. They feed each point to a callback
such as `PathCollector`.

`stgauss2_path` returns the points of the streamline through one pixel of a
`FLOAT4` tensor image. Each point is `(x, y, signed arc length)`, ordered
from the backward end to the forward end.

### `xdogflow.convert`

`from_pillow` turns any Pillow picture into an opaque `UCHAR4` image.

`to_pillow` turns single-channel images into mode `L` and four-channel
images into mode `RGB`. Float values are clamped to `[0, 1]` and scaled to
bytes. Two-channel images raise `ValueError`.

### `xdogflow.settings`

`Settings` is a dataclass with every pipeline parameter, its default and its
limits.

- `validate()` checks each field.
- `sync_dog()` derives the inactive thresholding parameters from the active
  ones.

`tau_to_p` and `p_to_tau` convert between the `(tau, epsilon, phi)` and
`(p, epsilon_p, phi_p)` forms.

### `xdogflow.paths`

`settings_filename` suggests where to save a file derived from an input
picture, for example a `.ini` file of settings.

### `xdogflow.devices`

- `cores_per_multiprocessor(major, minor)` gives the number of cores per
  multiprocessor for a compute capability, or `None` if it is unknown.
- `format_version` renders a packed driver version such as `4010` as
  `"4.10"`.

## Example

```python
import numpy as np

from xdogflow.image import Image, PixelType
from xdogflow.settings import tau_to_p
from xdogflow.streamline import stgauss2_path

# (tau, epsilon, phi) -> (p, epsilon_p, phi_p)
print(tau_to_p(0.95595, 3.50220, 0.3859))

# A 16x16 tensor field with vertical gradients, so the flow is horizontal.
field = np.zeros((16, 16, 4), dtype=np.float32)
field[..., 1] = 1.0  # G
st = Image(PixelType.FLOAT4, 16, 16, field)

points = stgauss2_path(8, 8, st, 2.0, 90.0, False, True, 2, 1.0, 2.0)
for x, y, arc in points:
    print(x, y, arc)
```

## What the package does not do

The package provides the pieces that an XDoG pipeline is built from, but not
the pipeline itself.

- It has no image filters: no Gaussian, bilateral or difference-of-Gaussians
  filtering, no thresholding, colour conversion, quantization or warping.
- It has no command-line program, no graphical interface and no video
  playback.
- `Settings` only holds and checks parameter values. Nothing in the package
  applies them to an image or saves them to a file.