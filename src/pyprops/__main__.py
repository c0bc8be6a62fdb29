# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/11/03 14:05:52

"""Convert between `.properties`, JSON and YAML files.

e.g. `python -m pyprops app.properties app.yaml`
"""

import argparse
import json
import logging
import sys
from os.path import splitext

import yaml

from .abstract import FileHandler
from .properties import (
    Properties,
    PropertiesError,
    PropertiesJsonParser,
    PropertiesParser,
    PropertiesYamlParser
)

HANDLERS: dict[str, type[FileHandler[Properties]]] = {
    'properties': PropertiesParser,
    'json': PropertiesJsonParser,
    'yaml': PropertiesYamlParser,
}
SUFFIXES = {'.properties': 'properties', '.json': 'json',
            '.yaml': 'yaml', '.yml': 'yaml'}


def guess_format(filename: str, fmt: str | None) -> str:
    if fmt is not None:
        return fmt
    suffix = splitext(filename)[1].lower()
    if suffix not in SUFFIXES:
        raise ValueError(f'unable to guess format of "{filename}".')
    return SUFFIXES[suffix]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='pyprops',
        description='convert between .properties, json and yaml files')
    parser.add_argument('src', help='the file to read')
    parser.add_argument('dst', help='the file to write')
    parser.add_argument('--from', dest='src_fmt', choices=HANDLERS,
                        help='format of src, guessed from suffix by default')
    parser.add_argument('--to', dest='dst_fmt', choices=HANDLERS,
                        help='format of dst, guessed from suffix by default')
    parser.add_argument('--encoding', default='utf-8',
                        help='text codec of both files, default is utf-8')
    parser.add_argument('--indent', type=int, default=2,
                        help='indent of json/yaml output, default is 2')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    try:
        src_fmt = guess_format(args.src, args.src_fmt)
        dst_fmt = guess_format(args.dst, args.dst_fmt)
    except ValueError as e:
        logging.error(e)
        return 2

    try:
        props = HANDLERS[src_fmt](args.src, args.encoding).read()
        writer = HANDLERS[dst_fmt](args.dst, args.encoding)
        if dst_fmt == 'properties':
            writer.write(props)
        else:
            writer.write(props, indent=args.indent)
    except (PropertiesError, json.JSONDecodeError, yaml.YAMLError) as e:
        logging.error(f'{args.src}: {e}')
        return 1
    logging.info(f'{len(props)} properties converted: '
                 f'{args.src} -> {args.dst}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
