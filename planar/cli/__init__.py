"""Planar CLI

Usage:
    planar points [options] [--] <p1> <p2> <p3>
    planar classify [options] [--] <plane> <point>
    planar rotate [options] [--] <plane> <axis> <angle>
    planar translate [options] [--] <plane> <offset>
    planar -h | --help
    planar --version

Vectors are comma separated values, ex: 0,1,0,-2 for the plane y = 2.
Put -- before the arguments when the first value is negative.

Options:
    -h --help          Show this screen
    --version          Show version
    --format=<fmt>     Numeric format of the output [default: g]
    --epsilon=<e>      Tolerance used to classify a point [default: 0]
    --normalize        Normalize the plane before using it
    --debug            Enable debug logging
"""

from collections import namedtuple
import logging
import sys

import docopt

import planar
from planar.cli import command
from planar.exception import InvalidArgumentError, PlanarError


logger = logging.getLogger()

CliConfiguration = namedtuple('CliConfiguration',
                              ['debug', 'format', 'epsilon', 'normalize'])


def init_logger(configuration):
    if configuration.debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    if logger.handlers:
        return

    formatter = logging.Formatter('%(asctime)s :: %(levelname)s '
                                  ':: %(message)s')
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(logging.DEBUG)
    logger.addHandler(stream_handler)


def read_configuration(args):
    try:
        epsilon = float(args['--epsilon'])
    except ValueError:
        raise InvalidArgumentError(
            "Epsilon must be a number, got %s" % args['--epsilon'])

    return CliConfiguration(debug=args['--debug'],
                            format=args['--format'],
                            epsilon=epsilon,
                            normalize=args['--normalize'])


def main(argv=None):
    args = docopt.docopt(__doc__, argv=argv, version=planar.__version__)

    try:
        configuration = read_configuration(args)
        init_logger(configuration)
        logger.debug("Configuration: %s", configuration)

        if args['points']:
            result = command.points(configuration, args['<p1>'],
                                    args['<p2>'], args['<p3>'])
        elif args['classify']:
            result = command.classify(configuration, args['<plane>'],
                                      args['<point>'])
        elif args['rotate']:
            result = command.rotate(configuration, args['<plane>'],
                                    args['<axis>'], args['<angle>'])
        else:
            result = command.translate(configuration, args['<plane>'],
                                       args['<offset>'])
    except PlanarError as e:
        print("planar: %s" % e, file=sys.stderr)
        return 1

    print(result)
    return 0

if __name__ == '__main__':
    sys.exit(main())
