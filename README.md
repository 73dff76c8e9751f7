# vecmat

Fixed-size vectors and square matrices in plain Python, meant for small
geometry jobs such as 2D/3D game physics. There are no dependencies beyond
the standard library.

## Install

    pip install vecmat

## Vectors

`Vector` holds a fixed number of float components. Build one with a size and
some values; if fewer values than the size are given, the last value fills
the rest, and no values give a zero vector. Without `size`, the number of
values given is the size. More values than the size raise `ValueError`.

```python
from vecmat.vector import Vector, vector2, vector3, vector4

v = vector3(1.0, 2.0, -1.0)
w = vector3(-1.0, 1.0, 3.0)

v + w              # component-wise sum
v - w              # component-wise difference
-v                 # negation
2.0 * v            # scaling (v * 2.0 and v / 2.0 work too)
v * w              # scalar (dot) product: -2.0
v.cross_product(w) # three-dimensional cross product
v.length()
v.square_of_length()

vector4(1.0, 2.0, 3.0)   # Vector(1.0, 2.0, 3.0, 3.0)
vector4()                # all zeros
Vector(1, 2, 3)          # size taken from the values

u = Vector.from_angle(0.0, size=2)   # unit vector along the x axis
u.angle(0, 1)                        # angle in the x/y plane, in radians

d = vector2(1.0, -1.0)
d.get_reflective(vector2(0.0, 1.0))  # Vector(1.0, 1.0)

d.normalize()      # in place, to length 1
d.at(5)            # raises IndexError
d[0]               # plain indexing, as for a list
```

In-place operators `+=`, `-=`, `*=` and `/=` change the vector itself;
`copy()` gives an independent vector. Vectors support `len()`, iteration
and `==`.

Errors:

- adding, subtracting or taking the dot product of vectors of different
  sizes raises `ValueError`;
- `cross_product` on anything but two three-dimensional vectors raises
  `ValueError`;
- `normalize()` on a zero-length vector raises `ValueError`;
- `from_angle` with a size below 2 raises `ValueError`;
- `at(index)` outside `0 .. size-1` raises `IndexError`.

## Square matrices

`SquareMatrix` stores its values as column vectors. Each argument is one
column, given as a `Vector` or any iterable of numbers; missing columns are
filled with zeros. `m[i]` is the i-th column (the stored vector itself, so
changing it changes the matrix); `m.at(row, column)` reads a single value
and `m.set_at(row, column, value)` writes one.

```python
from vecmat.matrix import SquareMatrix, matrix2, matrix3
from vecmat.vector import vector3

m = matrix3((1.0, 0.0, 1.0),
            (0.0, 1.0, 1.0),
            (0.0, 0.0, 1.0))
m * vector3(-6.0, 3.0, 1.0)          # matrix-vector product: (-6.0, 3.0, -2.0)

a = matrix2((1.0, 2.0), (-1.0, 1.5))
b = matrix2((2.0, -1.0), (1.0, 0.0))
a * b                                # matrix-matrix product

SquareMatrix(size=4)                 # all zeros
```

A column whose length does not match the matrix size, more columns than the
size, or a vector or matrix of a different size in a product raises
`ValueError`. `at` and `set_at` outside the matrix raise `IndexError`.

## Tests

    pip install vecmat[test]
    pytest