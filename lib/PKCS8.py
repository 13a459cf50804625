#!/usr/bin/env python
#
# Convert EC private keys (prime field, explicit domain parameters) to and
# from PKCS#8 PrivateKeyInfo (RFC 5208 / RFC 5915, SEC 1 C.2).
#
'''
    0:d=0  hl=4 l= 280 cons: SEQUENCE
    4:d=1  hl=2 l=   1 prim:  INTEGER           :00
    7:d=1  hl=3 l= 233 cons:  SEQUENCE
   10:d=2  hl=2 l=   7 prim:   OBJECT            :id-ecPublicKey
   19:d=2  hl=3 l= 221 cons:   SEQUENCE
   22:d=3  hl=2 l=   1 prim:    INTEGER           :01
   25:d=3  hl=2 l=  44 cons:    SEQUENCE
   27:d=4  hl=2 l=   7 prim:     OBJECT            :prime-field
   36:d=4  hl=2 l=  33 prim:     INTEGER           :A9FB57DBA1EEA9BC3E66...
   71:d=3  hl=2 l=  68 cons:    SEQUENCE
   73:d=4  hl=2 l=  32 prim:     OCTET STRING      [HEX DUMP]:7D5A0975FC2C...
  107:d=4  hl=2 l=  32 prim:     OCTET STRING      [HEX DUMP]:26DC5C6CE94A...
  141:d=3  hl=2 l=  65 prim:    OCTET STRING      [HEX DUMP]:048BD2AEB9CB...
  208:d=3  hl=2 l=  33 prim:    INTEGER           :A9FB57DBA1EEA9BC3E66...
  243:d=1  hl=2 l=  39 prim:  OCTET STRING      [HEX DUMP]:3025020101...

Note that the domain parameters are not in the ECParameters order of
SEC 1; the cofactor leads and the coefficients are carried as plain
OCTET STRINGs. This is the layout existing keys in the field use, so it
has to be kept as is.
'''
import logging

from asn1crypto import pem
from asn1crypto.core import ( Integer, ObjectIdentifier, OctetString, Sequence )

from ECKey import ECKey
from ECPoint import encode_uncompressed_point, decode_uncompressed_point
from KeyErrors import PreconditionError, StructureError

logger = logging.getLogger(__name__)

OID_EC_PUBLIC_KEY = '1.2.840.10045.2.1'
OID_PRIME_FIELD = '1.2.840.10045.1.1'

PEM_TYPE = 'PRIVATE KEY'

class ECAlgorithmIdentifier(ObjectIdentifier):
        _map = {
           OID_EC_PUBLIC_KEY: 'ecPublicKey',
        }

class FieldType(ObjectIdentifier):
        _map = {
           OID_PRIME_FIELD: 'prime-field',
        }

class FieldID(Sequence):
        _fields = [
            ('fieldType', FieldType),
            ('prime', Integer),
        ]

class CurveCoefficients(Sequence):
        _fields = [
            ('a', OctetString),
            ('b', OctetString),
        ]

class ECParameters(Sequence):
        _fields = [
            ('cofactor', Integer),
            ('fieldID', FieldID),
            ('curve', CurveCoefficients),
            ('base', OctetString),
            ('order', Integer),
        ]

class PrivateKeyAlgorithmIdentifier(Sequence):
        _fields = [
            ('algorithm', ECAlgorithmIdentifier),
            ('parameters', ECParameters),
        ]

class ECPrivateKey(Sequence):
        _fields = [
            ('version', Integer),
            ('privateKey', OctetString),
        ]

class PrivateKeyInfo(Sequence):
        _fields = [
            ('version', Integer),
            ('privateKeyAlgorithm', PrivateKeyAlgorithmIdentifier),
            ('privateKey', OctetString),
        ]

def strip_leading_zeros(value):
    value = bytes(value)
    i = 0
    while i < len(value) and value[i] == 0:
        i += 1
    return value[i:]

def unsigned_integer(value):
    '''
    Content octets for a DER INTEGER holding an unsigned value: a 0x00 is
    put in front when the top bit is set, so it is not read back as a
    negative number. Other than that the bytes are taken as they are.
    '''
    value = bytes(value)
    if len(value) == 0:
        return b'\x00'
    if value[0] & 0x80:
        return b'\x00' + value
    return value

def integer_value(contents, name='INTEGER'):
    '''
    Reverse of unsigned_integer(): drops the sign padding again.
    '''
    contents = bytes(contents)
    if len(contents) == 0:
        raise StructureError("{} has no content octets".format(name))
    if contents[0] & 0x80:
        raise StructureError("{} is negative".format(name))
    if len(contents) > 1 and contents[0] == 0 and contents[1] & 0x80:
        return contents[1:]
    return contents

def _integer(value):
    return Integer(contents=unsigned_integer(value))

def _expect(node, count, name):
    # Exact element count, also where the Sequence schema would take surplus elements.
    if len(node) != count:
        raise StructureError("{} has {} elements; expected {}".format(name, len(node), count))
    return node

def encode(key):
    if not isinstance(key, ECKey) or not key.is_private():
        raise PreconditionError("Only private EC keys can be encoded as PKCS#8")

    missing = [n for n in ECKey.COMPONENTS if not key.has_component(n)]
    if missing:
        raise PreconditionError("EC key lacks component(s) {}".format(",".join(missing)))

    parameters = ECParameters({
        'cofactor': _integer(strip_leading_zeros(key.component(ECKey.ECC_H))),
        'fieldID': FieldID({
            'fieldType': OID_PRIME_FIELD,
            'prime': _integer(key.component(ECKey.ECC_P)) }),
        'curve': CurveCoefficients({
            'a': OctetString(key.component(ECKey.ECC_A)),
            'b': OctetString(key.component(ECKey.ECC_B)) }),
        'base': OctetString(encode_uncompressed_point(
            key.component(ECKey.ECC_GX), key.component(ECKey.ECC_GY))),
        'order': _integer(key.component(ECKey.ECC_N)),
    })

    privateKey = ECPrivateKey({
        'version': Integer(1),
        'privateKey': OctetString(key.component(ECKey.ECC_D)) })

    privateKeyInfo = PrivateKeyInfo({
        'version': Integer(0),
        'privateKeyAlgorithm': PrivateKeyAlgorithmIdentifier({
            'algorithm': OID_EC_PUBLIC_KEY,
            'parameters': parameters }),
        'privateKey': OctetString(privateKey.dump()) })

    der = privateKeyInfo.dump()
    logger.debug("Encoded EC private key as {} bytes of PKCS#8".format(len(der)))
    return der

def decode(encoded):
    if not isinstance(encoded, (bytes, bytearray, memoryview)):
        raise StructureError("PKCS#8 data must be bytes, not {}".format(type(encoded).__name__))

    try:
        return _decode(bytes(encoded))
    except ValueError as e:
        raise StructureError("Not a PKCS#8 EC private key: {}".format(str(e))) from e

def _decode(encoded):
    p8 = _expect(PrivateKeyInfo.load(encoded, strict=True), 3, 'PrivateKeyInfo')
    if p8['version'].contents != b'\x00':
        raise StructureError("Unsupported PrivateKeyInfo version {}".format(p8['version'].contents.hex()))

    # Raw private key value
    privKeyBlock = p8['privateKey'].native
    inner = _expect(ECPrivateKey.load(privKeyBlock, strict=True), 2, 'ECPrivateKey')
    if inner['version'].contents != b'\x01':
        raise StructureError("Unsupported ECPrivateKey version {}".format(inner['version'].contents.hex()))
    components = { ECKey.ECC_D: inner['privateKey'].native }

    # Domain parameters
    algorithm = _expect(p8['privateKeyAlgorithm'], 2, 'AlgorithmIdentifier')
    if algorithm['algorithm'].dotted != OID_EC_PUBLIC_KEY:
        raise StructureError("Not an EC key: algorithm {}".format(algorithm['algorithm'].dotted))

    domainParameter = _expect(algorithm['parameters'], 5, 'ECParameters')

    components[ECKey.ECC_H] = integer_value(domainParameter['cofactor'].contents, 'cofactor')

    field = _expect(domainParameter['fieldID'], 2, 'FieldID')
    if field['fieldType'].dotted != OID_PRIME_FIELD:
        raise StructureError("Not a prime field: {}".format(field['fieldType'].dotted))
    components[ECKey.ECC_P] = integer_value(field['prime'].contents, 'prime')

    coeff = _expect(domainParameter['curve'], 2, 'Curve')
    components[ECKey.ECC_A] = coeff['a'].native
    components[ECKey.ECC_B] = coeff['b'].native

    x, y = decode_uncompressed_point(domainParameter['base'].native)
    components[ECKey.ECC_GX] = x
    components[ECKey.ECC_GY] = y

    components[ECKey.ECC_N] = integer_value(domainParameter['order'].contents, 'order')

    logger.debug("Decoded PKCS#8 EC private key ({} byte prime)".format(len(components[ECKey.ECC_P])))
    return ECKey(ECKey.PRIVATE, components)

def encode_pem(key):
    return pem.armor(PEM_TYPE, encode(key)).decode('ASCII')

def decode_pem(byte_string):
    try:
        if isinstance(byte_string, str):
            byte_string = byte_string.encode('ASCII')
        elif isinstance(byte_string, (bytearray, memoryview)):
            byte_string = bytes(byte_string)
        elif not isinstance(byte_string, bytes):
            raise StructureError("PKCS#8 data must be bytes or str, not {}".format(type(byte_string).__name__))

        if pem.detect(byte_string):
            type_name, headers, decoded_bytes = pem.unarmor(byte_string)
            if type_name != PEM_TYPE:
                raise StructureError("PEM block is a '{}', not a '{}'".format(type_name, PEM_TYPE))
            byte_string = decoded_bytes

    except ValueError as e:
        raise StructureError("Cannot unarmor PEM data: {}".format(str(e))) from e

    return decode(byte_string)
