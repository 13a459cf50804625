import pytest

import ECCurves
from ECKey import ECKey

@pytest.mark.parametrize('oid,name', [
    (ECCurves.SECP256R1, 'secp256r1'),
    (ECCurves.BRAINPOOLP256R1, 'brainpoolP256r1'),
])
def test_domain_parameters(oid, name):
    assert ECCurves.name(oid) == name
    params = ECCurves.domain_parameters(oid)
    assert set(params) == set(ECKey.COMPONENTS) - {ECKey.ECC_D}
    for component in (ECKey.ECC_P, ECKey.ECC_A, ECKey.ECC_B, ECKey.ECC_GX, ECKey.ECC_GY, ECKey.ECC_N):
        assert len(params[component]) == 32
    assert params[ECKey.ECC_H] == b'\x01'

def test_base_point_on_curve():
    for oid in ECCurves.curves:
        params = ECCurves.domain_parameters(oid)
        p, a, b, x, y = [int.from_bytes(params[c], 'big') for c in
            (ECKey.ECC_P, ECKey.ECC_A, ECKey.ECC_B, ECKey.ECC_GX, ECKey.ECC_GY)]
        assert (y * y - (x * x * x + a * x + b)) % p == 0

def test_unknown_curve():
    with pytest.raises(ValueError):
        ECCurves.domain_parameters('1.2.3.4')
    with pytest.raises(ValueError):
        ECCurves.random_scalar('1.2.3.4')

def test_private_key():
    d = b'\x01' * 32
    key = ECCurves.private_key(ECCurves.SECP256R1, d)
    assert key.is_private()
    assert key.curve_oid == ECCurves.SECP256R1
    assert key.component(ECKey.ECC_D) == d
    assert key.component(ECKey.ECC_GX).hex().startswith('6b17d1f2')

def test_random_scalar_in_range():
    for oid in ECCurves.curves:
        n = int.from_bytes(ECCurves.domain_parameters(oid)[ECKey.ECC_N], 'big')
        for _ in range(16):
            d = ECCurves.random_scalar(oid)
            assert len(d) == 32
            assert 1 <= int.from_bytes(d, 'big') < n
