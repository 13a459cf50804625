# Errors raised by the PKCS#8 key codec.
#

class PKCS8Error(Exception):
    def __init__(self, msg):
        self.msg = msg
        super().__init__(msg)

# Key handed to the codec is not what it expects (e.g. a public key to encode).
class PreconditionError(PKCS8Error):
    pass

# Encoded data does not follow the PrivateKeyInfo layout.
class StructureError(PKCS8Error):
    pass

# Point octets are not an uncompressed point of even coordinate width.
class CoordinateError(StructureError):
    pass
