from rowmat.linalg.vec4 import Vec4


class InvalidArgument(ValueError):
    """Raised when a Mat4 is built from malformed input."""


class Mat4:
    """4x4 matrix stored as 4 row vectors.

    Element (i, j) is `m[i][j]`. Vectors are treated as column vectors:
        v' = M * v

    Rows passed in from outside (`from_row_array`, `from_rows`, `m[i] = v`)
    are copied, so a Mat4 never shares a row with anything else. `m[i]`
    returns the stored row itself so `m[i][j] = x` edits the matrix.

    Compares by value, so instances are unhashable.

    `M * N` multiplies in place: M is overwritten with the product and
    returned. Clone first if the left operand must survive.
    """

    __hash__ = None

    def __init__(self, scale=0.0):
        s = float(scale)
        self.rows = [
            Vec4(s, 0.0, 0.0, 0.0),
            Vec4(0.0, s, 0.0, 0.0),
            Vec4(0.0, 0.0, s, 0.0),
            Vec4(0.0, 0.0, 0.0, s),
        ]

    @classmethod
    def from_row_array(cls, rows):
        rows = list(rows)
        if len(rows) != 4:
            raise InvalidArgument(f"wrong row count: expected 4, got {len(rows)}")
        return cls()._load(rows)

    @classmethod
    def from_rows(cls, a, b, c, d):
        return cls()._load((a, b, c, d))

    def _load(self, rows):
        for dst, src in zip(self.rows, rows):
            dst.set(src.x, src.y, src.z, src.w)
        return self

    def zero(self):
        for r in self.rows:
            r.zero()
        return self

    def identity(self):
        self.rows[0].set(1.0, 0.0, 0.0, 0.0)
        self.rows[1].set(0.0, 1.0, 0.0, 0.0)
        self.rows[2].set(0.0, 0.0, 1.0, 0.0)
        self.rows[3].set(0.0, 0.0, 0.0, 1.0)
        return self

    def clone(self):
        return Mat4()._load(self.rows)

    def __getitem__(self, i):
        return self.rows[i]

    def __setitem__(self, i, row):
        self.rows[i] = row.clone()

    def __len__(self):
        return 4

    def __iter__(self):
        return iter(self.rows)

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __repr__(self):
        return "Mat4({}, {}, {}, {})".format(*self.to_tuple())

    def to_tuple(self):
        return tuple(r.to_tuple() for r in self.rows)

    def to_array_row_major(self):
        out = []
        for r in self.rows:
            out.extend(r.to_array())
        return out

    def to_array_col_major(self):
        """Flatten column by column: element (i, j) lands at index j * 4 + i.

        This is the layout OpenGL-style APIs expect for uniform upload.
        """
        out = []
        for j in range(4):
            for i in range(4):
                out.append(self.rows[i][j])
        return out

    def transpose(self):
        r = self.rows
        return Mat4.from_rows(
            Vec4(r[0].x, r[1].x, r[2].x, r[3].x),
            Vec4(r[0].y, r[1].y, r[2].y, r[3].y),
            Vec4(r[0].z, r[1].z, r[2].z, r[3].z),
            Vec4(r[0].w, r[1].w, r[2].w, r[3].w),
        )

    def mult_vec4(self, b):
        """Return M * b as a new Vec4. Neither operand is modified."""
        x = b.x
        y = b.y
        z = b.z
        w = b.w
        r = self.rows
        return Vec4(
            r[0].x * x + r[0].y * y + r[0].z * z + r[0].w * w,
            r[1].x * x + r[1].y * y + r[1].z * z + r[1].w * w,
            r[2].x * x + r[2].y * y + r[2].z * z + r[2].w * w,
            r[3].x * x + r[3].y * y + r[3].z * z + r[3].w * w,
        )

    def mult_mat4(self, b):
        """Overwrite self with self * b and return self.

        Each product row is a combination of b's rows weighted by one row of
        self. All four are built from the pre-call values before any row of
        self is replaced, so `m.mult_mat4(m)` squares m correctly.
        """
        out = []
        for a in self.rows:
            out.append(a.x * b[0] + a.y * b[1] + a.z * b[2] + a.w * b[3])
        for i, row in enumerate(out):
            self.rows[i] = row
        return self

    def __mul__(self, other):
        if isinstance(other, Mat4):
            return self.mult_mat4(other)
        if isinstance(other, Vec4):
            return self.mult_vec4(other)
        return NotImplemented
