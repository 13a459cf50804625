# Uncompressed EC point encoding (SEC 1, 2.3.3 / 2.3.4).
#
from KeyErrors import CoordinateError

UNCOMPRESSED = 0x04

def encode_uncompressed_point(x, y):
    '''
    Marker byte 0x04 followed by the raw x and y octets. Both coordinates
    are expected to be of the same width; that is up to the caller.
    '''
    return bytes([UNCOMPRESSED]) + bytes(x) + bytes(y)

def decode_uncompressed_point(data):
    data = bytes(data)
    if len(data) == 0:
        raise CoordinateError("Empty point encoding")

    if data[0] != UNCOMPRESSED:
        raise CoordinateError("Not an uncompressed point (marker 0x{:02x})".format(data[0]))

    length = len(data) - 1
    if length % 2:
        raise CoordinateError("Odd number of coordinate bytes ({}) after the marker".format(length))

    size = length // 2
    return data[1:1 + size], data[1 + size:1 + 2 * size]
