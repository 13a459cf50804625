#!/usr/bin/env python
#
# Round trip a freshly made EC private key through PKCS#8 and back.
#
import sys
import logging

import configargparse

import ECCurves
import PKCS8
from ECKey import ECKey
from KeyErrors import PKCS8Error

default_cnf_files = ["/usr/local/etc/pkcs8.ini","/etc/pkcs8.ini","~/.pkcs8.ini", "pkcs8.ini"]
default_curve = ECCurves.BRAINPOOLP256R1
default_rounds = 1

logger = logging.getLogger(__name__)

def parseArguments(argv=None):
  parser = configargparse.ArgParser(default_config_files=default_cnf_files,
       description='PKCS#8 EC private key self test')

  parser.add('-c', '--config', is_config_file=True,
       help='config file path (default is '+",".join(default_cnf_files)+').')
  parser.add('--curve','-C',default=default_curve, choices=sorted(ECCurves.curves.keys()),
       help='OID of the curve to test with (default: '+default_curve+')')
  parser.add('--rounds','-r',default=default_rounds, type=int,
       help='Number of keys to round trip (default: '+str(default_rounds)+')')

  parser.add('--verbose', '-v', action='count', default=0,
       help='Verbose on (default off)')
  parser.add('--debug', '-d', action='count', default=0,
       help='Debuging on; implies verbose (default off)')
  parser.add('-l','--logfile', type=configargparse.FileType('a'),
       help='Append log entries to specified file (default: none)')

  return parser.parse_args(argv)

def setup(cnf):
  loglevel=logging.ERROR
  FORMAT = "%(message)s"

  if cnf.verbose:
      loglevel=logging.INFO
      FORMAT="%(asctime)s %(levelname)s %(message)s"

  if cnf.debug:
      loglevel=logging.DEBUG
      FORMAT="%(asctime)s %(levelname)s %(message)s\n\t%(pathname)s:%(lineno)d %(module)s %(funcName)s"

  logging.basicConfig(format=FORMAT)

  root = logging.getLogger()
  root.setLevel(loglevel)

  if cnf.logfile:
    handler = logging.StreamHandler(stream=cnf.logfile)
    handler.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(handler)

def selftest(oid=default_curve):
  key = ECCurves.private_key(oid, ECCurves.random_scalar(oid))
  logger.info("Testing with a {} key".format(ECCurves.name(oid)))

  p8Key = PKCS8.encode(key)
  logger.debug("PKCS#8: {}".format(p8Key.hex()))

  decoded = PKCS8.decode(p8Key)

  for component in ECKey.COMPONENTS:
    if decoded.component(component) != key.component(component):
      logger.critical("Component {} differs after decoding: {} != {}".format(component,
          decoded.component(component).hex(), key.component(component).hex()))
      return False

  refp8Key = PKCS8.encode(decoded)
  if refp8Key != p8Key:
    logger.critical("Re-encoded key differs from the original encoding.")
    return False

  logger.info("Round trip of {} bytes Ok".format(len(p8Key)))
  return True

def main(argv=None):
  cnf = parseArguments(argv)
  setup(cnf)

  if cnf.rounds < 1:
    logger.critical("Need at least one round. Aborting.")
    return 1

  for i in range(cnf.rounds):
    try:
      if not selftest(cnf.curve):
        return 1
    except PKCS8Error as e:
      logger.critical("Round {} failed: {}".format(i + 1, e.msg))
      return 1

  print("Ok")
  return 0

if __name__ == "__main__":
  sys.exit(main())
