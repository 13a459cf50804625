import pytest

from ECKey import ECKey
from KeyErrors import PreconditionError

def components(**extra):
    c = {
        ECKey.ECC_P: b'\xff\x01',
        ECKey.ECC_A: b'\x01',
        ECKey.ECC_B: b'\x02',
        ECKey.ECC_GX: b'\x12\x34',
        ECKey.ECC_GY: b'\x56\x78',
        ECKey.ECC_N: b'\x7f',
        ECKey.ECC_H: b'\x01',
    }
    c.update(extra)
    return c

def test_private_key():
    key = ECKey(ECKey.PRIVATE, components(D=b'\x0a'), curve_oid='1.2.3')
    assert key.is_private()
    assert key.kind == ECKey.PRIVATE
    assert key.curve_oid == '1.2.3'
    assert key.component(ECKey.ECC_D) == b'\x0a'
    assert key.has_component(ECKey.ECC_GX)

def test_public_key():
    key = ECKey(ECKey.PUBLIC, components())
    assert not key.is_private()
    assert not key.has_component(ECKey.ECC_D)
    with pytest.raises(KeyError):
        key.component(ECKey.ECC_D)

def test_private_needs_d():
    with pytest.raises(PreconditionError):
        ECKey(ECKey.PRIVATE, components())

def test_public_must_not_carry_d():
    with pytest.raises(PreconditionError):
        ECKey(ECKey.PUBLIC, components(D=b'\x01'))

@pytest.mark.parametrize('name', [ECKey.ECC_A, ECKey.ECC_B])
def test_coefficients_required(name):
    c = components(D=b'\x01')
    del c[name]
    with pytest.raises(PreconditionError):
        ECKey(ECKey.PRIVATE, c)

def test_none_counts_as_absent():
    key = ECKey(ECKey.PUBLIC, components(D=None))
    assert not key.has_component(ECKey.ECC_D)

def test_unknown_kind():
    with pytest.raises(ValueError):
        ECKey('secret', components(D=b'\x01'))

def test_unknown_component():
    with pytest.raises(ValueError):
        ECKey(ECKey.PUBLIC, components(Q=b'\x01'))

@pytest.mark.parametrize('value', ['ff01', 0xff01, [0xff, 0x01]])
def test_components_must_be_bytes(value):
    with pytest.raises(TypeError):
        ECKey(ECKey.PUBLIC, components(P=value))

def test_components_are_copied_to_bytes():
    p = bytearray(b'\xff\x01')
    key = ECKey(ECKey.PUBLIC, components(P=p))
    p[0] = 0
    assert key.component(ECKey.ECC_P) == b'\xff\x01'
    assert type(key.component(ECKey.ECC_P)) is bytes

def test_immutable():
    key = ECKey(ECKey.PRIVATE, components(D=b'\x01'))
    with pytest.raises(AttributeError):
        key.kind = ECKey.PUBLIC
    with pytest.raises(AttributeError):
        key._components = {}
    key.components()[ECKey.ECC_D] = b'\x02'
    assert key.component(ECKey.ECC_D) == b'\x01'

def test_equality_and_hash():
    a = ECKey(ECKey.PRIVATE, components(D=b'\x01'))
    b = ECKey(ECKey.PRIVATE, components(D=b'\x01'))
    c = ECKey(ECKey.PRIVATE, components(D=b'\x02'))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != 'key'

def test_repr_hides_private_scalar():
    key = ECKey(ECKey.PRIVATE, components(D=b'\xde\xad\xbe\xef'))
    assert 'dead' not in repr(key).lower()
    assert 'D' in repr(key)
