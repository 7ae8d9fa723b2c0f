"""Command line front end for dumping files, hex strings and serial port
   captures, plus a small demonstration of the dump functions.

"""

import argparse
import binascii
import io
import os
import sys
from typing import List, Union

import serial

from bytedump.byte_source import SourceReadError
from bytedump.dump_hex import InvalidRegionError, dump_buffer, dump_bytes, dump_stream, log_hex
from bytedump.log import log, log_to_file, log_to_list, logging_to
from bytedump.serial_port import DEFAULT_BAUD, SerialPort

DEFAULT_COUNT = 64
DEMO_DATA = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16,
             48, 49, 50, 97, 98, 99]


def auto_int(string: str) -> int:
    """Parses decimal, or hex/octal/binary with a 0x/0o/0b prefix."""
    try:
        return int(string, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{string}'") from None


def parse_hex(string: str) -> bytes:
    """Converts hex text like '30 31 32' into bytes."""
    return binascii.unhexlify(''.join(string.split()))


def demo() -> None:
    """Logs a few sample dumps of the same data held in different ways."""
    log('test - byte array')
    log(dump_bytes(DEMO_DATA, end=0))
    log(dump_bytes(DEMO_DATA, 0, 5))
    log(dump_bytes(DEMO_DATA, end=8))
    log(dump_bytes(DEMO_DATA, end=15))
    log(dump_bytes(DEMO_DATA))

    log('test - stream')
    stream = io.BytesIO()
    stream.write(bytes(DEMO_DATA))
    log(dump_stream(stream))

    log('test - buffer')
    log(dump_buffer(memoryview(bytearray(DEMO_DATA))))


def dump_file(filename: str, offset: int, end: Union[int, None], prefix: str) -> None:
    """Dumps a file, by default up to its end."""
    with open(filename, 'rb') as file:
        file.seek(0, io.SEEK_END)
        log_hex(dump_stream(file, offset, end), prefix=prefix)


def dump_port(args: argparse.Namespace) -> None:
    """Captures bytes from a serial port and dumps them."""
    with SerialPort(args.port, args.baud) as port:
        data = port.read_bytes(args.count)
    log(f'Captured {len(data)} of {args.count} bytes from {args.port}')
    log_hex(dump_buffer(memoryview(data), args.offset, args.end), prefix=args.prefix)


def make_parser() -> argparse.ArgumentParser:
    """Builds the argument parser."""
    default_port = os.getenv('BYTEDUMP_PORT')
    parser = argparse.ArgumentParser(
        prog='dump_hex',
        usage='%(prog)s [options] [file]',
        description='Dump bytes as hex and ASCII, 8 bytes per row',
        epilog=('You can specify the default serial port using the ' +
                'BYTEDUMP_PORT environment variable.'))
    parser.add_argument('file',
                        nargs='?',
                        help='File to dump',
                        default=None)
    parser.add_argument('-x',
                        '--hex',
                        dest='hex',
                        help='Dump the bytes given as hex text',
                        default=None)
    default_port_help = ''
    if default_port:
        default_port_help = f" (default '{default_port}')"
    parser.add_argument('-p',
                        '--port',
                        dest='port',
                        help=f'Capture bytes from a serial port{default_port_help}',
                        default=default_port)
    parser.add_argument('-b',
                        '--baud',
                        dest='baud',
                        action='store',
                        type=int,
                        help=f'Set the baudrate used (default = {DEFAULT_BAUD})',
                        default=DEFAULT_BAUD)
    parser.add_argument('-c',
                        '--count',
                        dest='count',
                        type=auto_int,
                        help=f'Number of bytes to capture (default = {DEFAULT_COUNT})',
                        default=DEFAULT_COUNT)
    parser.add_argument('-s',
                        '--offset',
                        dest='offset',
                        type=auto_int,
                        help='Index of the first byte to dump (default = 0)',
                        default=0)
    parser.add_argument('-e',
                        '--end',
                        dest='end',
                        type=auto_int,
                        help='Index to stop dumping at (default = all the data)',
                        default=None)
    parser.add_argument('--prefix',
                        dest='prefix',
                        help='String to put in front of each line',
                        default='')
    parser.add_argument('-o',
                        '--output',
                        dest='output',
                        help='Write the dump to a file instead of stdout',
                        default=None)
    parser.add_argument('--demo',
                        dest='demo',
                        action='store_true',
                        help='Show some sample dumps',
                        default=False)
    return parser


def run(args: argparse.Namespace) -> int:
    """Performs whichever dump was asked for. Returns the exit status."""
    try:
        if args.demo:
            demo()
        elif args.hex is not None:
            data = parse_hex(args.hex)
            log_hex(dump_bytes(data, args.offset, args.end), prefix=args.prefix)
        elif args.file is not None:
            dump_file(args.file, args.offset, args.end, args.prefix)
        else:
            dump_port(args)
    except (SourceReadError, InvalidRegionError) as ex:
        log(ex)
        return 1
    except binascii.Error as ex:
        log(f'Invalid hex data: {ex}')
        return 1
    except serial.SerialException as ex:
        log(f"Unable to open port '{args.port}': {ex}")
        return 1
    except OSError as ex:
        log(f"Unable to open '{ex.filename}': {ex.strerror}")
        return 1
    return 0


def main(argv: Union[List[str], None] = None) -> int:
    """main function called when running from the command line."""
    parser = make_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)
    if not (args.demo or args.hex is not None or args.file is not None or args.port):
        parser.error('one of file, --hex, --port or --demo is required')

    if not args.output:
        return run(args)

    # Hold on to the output until the dump succeeds, so that a failed dump
    # doesn't clobber an existing output file.
    lines = []
    with logging_to(log_to_list, lines):
        status = run(args)
    if status != 0:
        for line in lines:
            log(line)
        return status
    with open(args.output, 'w', encoding='utf-8') as outfile:
        with logging_to(log_to_file, outfile):
            for line in lines:
                log(line)
    return status
