# Domain parameters of a few named prime curves, so keys can be put
# together from just a curve OID and a private scalar.
#
import secrets

from ECKey import ECKey

SECP256R1 = '1.2.840.10045.3.1.7'
BRAINPOOLP256R1 = '1.3.36.3.3.2.8.1.1.7'

# name, p, a, b, Gx, Gy, n, h
curves = {
    SECP256R1: ('secp256r1',
        'ffffffff00000001000000000000000000000000ffffffffffffffffffffffff',
        'ffffffff00000001000000000000000000000000fffffffffffffffffffffffc',
        '5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b',
        '6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296',
        '4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5',
        'ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551',
        '01'),
    BRAINPOOLP256R1: ('brainpoolP256r1',
        'a9fb57dba1eea9bc3e660a909d838d726e3bf623d52620282013481d1f6e5377',
        '7d5a0975fc2c3057eef67530417affe7fb8055c126dc5c6ce94a4b44f330b5d9',
        '26dc5c6ce94a4b44f330b5d9bbd77cbf958416295cf7e1ce6bccdc18ff8c07b6',
        '8bd2aeb9cb7e57cb2c4b482ffc81b7afb9de27e1e3bd23c23a4453bd9ace3262',
        '547ef835c3dac4fd97f8461a14611dc9c27745132ded8e545c1d54c72f046997',
        'a9fb57dba1eea9bc3e660a909d838d718c397aa3b561a6f7901e0e82974856a7',
        '01'),
}

def name(oid):
    return _curve(oid)[0]

def _curve(oid):
    if oid not in curves:
        raise ValueError("Unknown curve OID '{}'".format(oid))
    return curves[oid]

def domain_parameters(oid):
    p, a, b, gx, gy, n, h = [bytes.fromhex(v) for v in _curve(oid)[1:]]
    return {
        ECKey.ECC_P: p,
        ECKey.ECC_A: a,
        ECKey.ECC_B: b,
        ECKey.ECC_GX: gx,
        ECKey.ECC_GY: gy,
        ECKey.ECC_N: n,
        ECKey.ECC_H: h,
    }

def private_key(oid, d):
    components = domain_parameters(oid)
    components[ECKey.ECC_D] = d
    return ECKey(ECKey.PRIVATE, components, curve_oid=oid)

def random_scalar(oid):
    '''
    Random private scalar 1 <= d < n, at the byte width of the order.
    '''
    order = bytes.fromhex(_curve(oid)[6])
    n = int.from_bytes(order, 'big')
    d = secrets.randbelow(n - 1) + 1
    return d.to_bytes(len(order), 'big')
