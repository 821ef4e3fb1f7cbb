# hpcover

Tools for designing a cover (enclosure) around a heat pump. From the
dimensions of the device, the distances to nearby obstacles and the required
inner spaces, the generator picks parts from a parts library, works out the
inner and outer dimensions of a standard cover and the number of wall
modules, and records why a standard cover cannot be made when it cannot.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `hpcover.parameters`

`parse_parameters(text)` and `load_parameters(path)` read the parts library
configuration into a `CoverParameters` dataclass. Each line has the form
`name : value ...`, for example `lengths : 800 1000 1200`. Lines starting
with `#` and empty lines are skipped, unknown names are ignored, and a line
without `:` after the name raises `ParameterError` (a `ValueError` carrying
`line_number`).

Recognised names: `lengths`, `widths`, `heights` (lists), and
`out_length_param`, `out_width_param`, `out_height_param`,
`acc_length_param`, `acc_width_param`, `acc_height_param`, `front_space`,
`side_space`, `back_space`, `top_space`, `wall_space` (single values).
`CoverParameters.format()` returns a readable listing of everything loaded.

### `hpcover.cover`

`HPCover(parameters, errors=None)` generates a cover with
`HPCover.generate(dimensions)`. `dimensions` has three rows:

1. device width, depth and height;
2. distances to obstacles on the left, on the right and behind;
3. inner spaces at the sides, front, back and top.

`-1` means "not given": a missing inner space takes the default from the
configuration, a missing obstacle distance is not checked. The base lists
are sorted before use, so the three heights act as base, standard and top
module heights in ascending order.

`generate` returns `True` when a standard cover fits; the results are then in
`inner_dimensions`, `outer_dimensions` and `modules` (the total number of
wall modules, always even). It returns `False` when the cover would be too
long, wide or high, when no part matches, or when it would collide with an
obstacle; the reason is in `HPCover.error` (a `GenError`) and its message in
`HPCover.errors.message`. A malformed matrix or incomplete parts library
raises `ValueError`.

### `hpcover.errors`

`GenError` and `InputError` enumerate the failure reasons. `GeneratorError`
holds two message catalogues and the last raised error:
`raise_error(error)` sets `error` and `message`.
`GeneratorError.from_files(generator_path, input_path)` loads the catalogues
with `read_messages(path, limit)`, which reads up to `limit` non-empty lines,
each wrapped in newlines.

### `hpcover.dimensions`

`DimensionInput` validates typed dimensions: whole millimetres from 0 up to
but not including 2000. `check(text)` returns the number or raises
`DimensionError`; `submit(text)`, `edit()`, `display_saved(value)` and
`clear()` update its `DimensionStatus`; `value()` returns the accepted
dimension or `-1`. `OptionalDimensionInput` starts disabled and is switched
with `set_enabled(enabled)`. An optional `on_change` callback is called
whenever the status is re-evaluated.

### `hpcover.data_window`

`DataCollector` keeps the dimensions of the three steps (3, 3 and 4 values,
`-1` where not given). `check_inputs(inputs)` sums up a step's inputs as an
`InputsState` together with the message of a wrong input; `save(step, values)`
stores a step's values. `read_descriptions(path, limit)` reads label files,
and `DataCollector.from_files(label_paths, titles_path)` uses it.

### `hpcover.contact`

`UserDataStatus` and `contact_data_correct(mail_status, phone_status)`: the
e-mail address must be correct, the phone number may be left out but must
not be wrong.

### `hpcover.mailer`

`EmailComposer` builds the enquiry e-mail. `create_summary(std_cover, results)`
chooses the title for a standard or special cover, appends the order ID to
it and attaches the results; `generate(mail_address, phone_number)` puts the
customer's contact data in front of that summary.
`EmailComposer.from_files(std_path, special_path, order_id=0)` reads the two
titles from files.

### `hpcover.gallery`

`ImageCarousel` is a circular list of image files, loaded from a directory
(`load_directory`) or from the directory configured for a `Step`
(`load_step`), browsed with `next()`, `previous()` and `advance()` (which
keeps the last direction). `PartCarousel` does the same for `(path, quantity)`
parts; `part_info()` gives the file name followed by ` x<quantity>`.
`cover_size_for_modules(modules)` maps 0, 2, 4 and 6 wall modules to `S`,
`M`, `L` and `XL`.

### `hpcover.requests_queue`

`HttpRequestFrame` holds an `HttpMethod`, URL, headers and JSON data;
`setup(url, api_key)` sets the authorization header (and the content type for
POST). `RequestQueue` is a first-in, first-out queue that lets one request be
in flight at a time: `add(task)`, `execute_next(send)` hands the oldest request
to your `send` callable, and `finished(ok)` removes it on success or keeps it
and calls `on_failure` otherwise.

## Example

```python
from hpcover.cover import HPCover
from hpcover.parameters import parse_parameters

params = parse_parameters("""
lengths : 800 1000 1200
widths : 500 700
heights : 150 200 300
out_length_param : 40
out_width_param : 40
out_height_param : 30
acc_length_param : 10
acc_width_param : 10
acc_height_param : 5
front_space : 50
side_space : 60
back_space : 70
top_space : 80
wall_space : 100
""")

cover = HPCover(params)
dimensions = [
    [700, 400, 500],
    [-1, -1, -1],
    [-1, -1, -1, -1],
]
if cover.generate(dimensions):
    print(cover.inner_dimensions, cover.outer_dimensions, cover.modules)
else:
    print(cover.error)
```

## What the package does not do

There is no graphical interface, image rendering or command-line program:
the package provides the logic only. It sends no HTTP requests and no
e-mail itself; `RequestQueue.execute_next` hands requests to a callable you
supply, and `EmailComposer` only builds the message text. It keeps no usage
statistics and stores nothing beyond what the objects hold in memory.