# geokdtree

A static KD-tree index over points on a sphere. It answers the question
"which points lie within a given great-circle distance of this one?" without
checking every point.

Each point has an `id`, a latitude `lat` and a longitude `lon`, both in
radians. Latitude runs over [-π/2, π/2] and longitude over [-π, π]. Distances
come from the haversine formula. They are measured in the units of the sphere
radius you supply.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from geokdtree.geo_point import Point
from geokdtree.kd_tree import KDTree

points = [
    Point(id=0, lat=0.10, lon=0.20),
    Point(id=1, lat=0.11, lon=0.21),
    Point(id=2, lat=-0.90, lon=2.50),
]

# n_stop: the most points a leaf may hold before it is split
tree = KDTree(points, n_stop=1, sphere_radius=1.0)

near = tree.search_by_distance(Point(id=99, lat=0.10, lon=0.20), 0.05)
print(sorted(p.id for p in near))  # [0, 1]
```

`Point` and `SearchBox` are frozen dataclasses.

`KDTree(points, n_stop, sphere_radius)` builds the tree when it is created. At
each node it splits on whichever coordinate, latitude or longitude, has the
larger variance, and it cuts at the median. A node with `n_stop` points or
fewer becomes a leaf. If you give a non-empty set of points with an `n_stop`
below 1, the constructor raises `ValueError`.

`search_by_distance(point, distance)` returns a list of every indexed point
whose great-circle distance to `point` is less than or equal to `distance`.
The list is in no particular order.

### Lower-level helpers

- `geokdtree.sphere_helper.distance(p1, p2, radius)` returns the great-circle
  distance between two points.
- `geokdtree.sphere_helper.hav(x)` returns the haversine of `x`.
  `geokdtree.sphere_helper.archav(h)` returns its inverse, or `0.0` when `h`
  lies outside [0, 1].
- `geokdtree.sphere_helper.find_box(point, distance, radius)` returns a tuple
  of one or two latitude/longitude boxes that the search covers.
  - Near a pole, it returns a single box that spans every longitude.
  - When the range crosses the ±π longitude seam, it returns a second box on
    the other side of the seam.
- `geokdtree.search_box.SearchBox(lat_from, lat_to, lon_from, lon_to)` is a
  closed latitude/longitude rectangle.
  - `is_inside(point)` checks whether a point lies in the box.
  - `SearchBox.nested_box(inner, outer)` checks whether one box lies entirely
    within another.

## Benchmark

The `geokdtree-benchmark` command does the following:

1. It builds a tree over random points. The points stay 0.2 rad away from the
   poles and from the ±π seam.
2. It runs random radius queries against the tree and against a linear scan
   of the same points.
3. It prints any query where the sorted tree results and the scan results
   disagree by id.
4. It prints the average time per query for each method.

```
geokdtree-benchmark --amount 10000 --n-stop 300 --queries 100 --radius 1.0 --seed 42
```

All options are optional. Without them the command uses 10,000 points, an
`n_stop` of 300, 100 queries, a radius of 1.0 and no fixed seed.

From Python, call
`geokdtree.benchmark.run_benchmark(amount, n_stop, n_queries, radius, seed)`.
It returns a `BenchmarkResult` with these fields:

- `tree_times` and `simple_times`: the time for each query.
- `average_tree_time` and `average_simple_time`: the averages of those times.
- `mismatches`: the queries where the two methods disagreed.

`generate_points(amount, rng)` produces the random point set from a
`random.Random`.

## Limitations

The tree is static. Once it is built, you cannot insert or remove points. To
change the indexed set, build a new `KDTree`.

The only query is a radius search. There is no nearest-neighbour query and no
search by an arbitrary bounding box.