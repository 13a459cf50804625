# In-memory EC key over a prime field; every numeric component is kept
# as the raw unsigned big-endian bytes it was handed.
#
from KeyErrors import PreconditionError

class ECKey:
    PRIVATE = 'private'
    PUBLIC = 'public'

    ECC_P = 'P'
    ECC_A = 'A'
    ECC_B = 'B'
    ECC_GX = 'GX'
    ECC_GY = 'GY'
    ECC_N = 'N'
    ECC_H = 'H'
    ECC_D = 'D'

    COMPONENTS = (ECC_P, ECC_A, ECC_B, ECC_GX, ECC_GY, ECC_N, ECC_H, ECC_D)

    __slots__ = ('_kind', '_curve_oid', '_components')

    def __init__(self, kind, components, curve_oid=None):
        if kind not in (self.PRIVATE, self.PUBLIC):
            raise ValueError("Unknown key kind '{}'".format(kind))

        values = {}
        for name, value in components.items():
            if name not in self.COMPONENTS:
                raise ValueError("Unknown EC key component '{}'".format(name))
            if value is None:
                continue
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError("Component {} must be bytes, not {}".format(name, type(value).__name__))
            values[name] = bytes(value)

        for name in (self.ECC_A, self.ECC_B):
            if name not in values:
                raise PreconditionError("EC key lacks curve coefficient {}".format(name))

        if kind == self.PRIVATE and self.ECC_D not in values:
            raise PreconditionError("Private EC key without private scalar D")
        if kind == self.PUBLIC and self.ECC_D in values:
            raise PreconditionError("Public EC key carrying a private scalar D")

        object.__setattr__(self, '_kind', kind)
        object.__setattr__(self, '_curve_oid', curve_oid)
        object.__setattr__(self, '_components', values)

    def __setattr__(self, name, value):
        raise AttributeError("ECKey is immutable")

    def __delattr__(self, name):
        raise AttributeError("ECKey is immutable")

    @property
    def kind(self):
        return self._kind

    @property
    def curve_oid(self):
        return self._curve_oid

    def is_private(self):
        return self._kind == self.PRIVATE

    def has_component(self, name):
        return name in self._components

    def component(self, name):
        try:
            return self._components[name]
        except KeyError:
            raise KeyError("EC key has no component {}".format(name))

    def components(self):
        return dict(self._components)

    def __eq__(self, other):
        if not isinstance(other, ECKey):
            return NotImplemented
        return (self._kind == other._kind and
                self._curve_oid == other._curve_oid and
                self._components == other._components)

    def __hash__(self):
        return hash((self._kind, self._curve_oid, tuple(sorted(self._components.items()))))

    def __repr__(self):
        # Never leak D.
        shown = ",".join(n for n in self.COMPONENTS if n in self._components)
        return "<ECKey {} curve={} components={}>".format(self._kind, self._curve_oid, shown)
