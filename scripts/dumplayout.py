#!/usr/bin/env python3
'''
Print the artifacts generated from a module containing Table declarations.

The module must define the tables as Table subclasses and a SCHEMES mapping
(or list) with the coded schemes they use.
'''
import importlib
import logging
import os
import sys

from tablayout.core import Schema
from tablayout.exceptions import SchemaException
from tablayout.generator import generate
from tablayout.render import render


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} [module]

For example

 $ dumplayout.py tablayout.metadata.tables

dumps the layout of the ECMA-335 metadata tables (that's also the default).''')
    sys.exit(1)


def load(name):
    ns = importlib.import_module(name)

    schemes = getattr(ns, 'SCHEMES', None)
    if schemes is None:
        # the tables of the bundled metadata live in a submodule
        package = importlib.import_module(name.rpartition('.')[0]) if '.' in name else ns
        schemes = getattr(package, 'SCHEMES', ())

    return Schema.from_module(ns), schemes


if __name__ == '__main__':
    if len(sys.argv) > 2 or '-h' in sys.argv[1:]:
        usage(sys.argv[0])

    name = sys.argv[1] if len(sys.argv) == 2 else 'tablayout.metadata.tables'

    try:
        schema, schemes = load(name)
        artifacts = generate(schema, schemes)
    except SchemaException as e:
        logger.error(f'generation failed: {e}')
        sys.exit(2)

    print(render(artifacts), end='')
