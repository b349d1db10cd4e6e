#!/usr/bin/env python3
"""
zbus-xmlgen

This script reads D-Bus introspection XML and generates Rust trait declarations for the zbus crate:
either client proxy traits (`#[proxy]`) or server traits that a service implementation fills in.
Type signatures are compiled into Rust types and member names are turned into unique, keyword-safe
snake_case identifiers.

Usage:
    python zbus_xmlgen.py [--server] [--output <file>] [--verbose] [<input_file>]

Arguments:
    input_file      : Path to the introspection XML (default: read from stdin)
    --server        : Generate server traits instead of client proxies
    --output, -o    : Write the generated code to this file (default: stdout)
    --verbose, -v   : Print debug information to stderr

Environment overrides:
    XMLGEN_INPUT_FILE, XMLGEN_OUTPUT_FILE, XMLGEN_SERVER (1/true/yes), XMLGEN_VERBOSE (1/true/yes)

Example:
    python zbus_xmlgen.py org.freedesktop.Notifications.xml
    python zbus_xmlgen.py --server -o notifications_server.rs org.freedesktop.Notifications.xml
    busctl introspect --xml-interface org.freedesktop.DBus /org/freedesktop/DBus | python zbus_xmlgen.py
"""

import argparse
import os
import sys
from typing import List, Optional

from generators.client_proxy_generator import generate_client_proxies
from generators.server_trait_generator import generate_server_traits
from interface_model import InterfaceDescription
from introspection_loader import IntrospectionError, load_introspection_file, parse_introspection_xml
from signature_parser import MalformedSignatureError

TRUTHY = ('1', 'true', 'yes', 'on')


class IntrospectionConverter:
    """
    Handles the conversion of one introspection document into Rust source.
    """

    def __init__(self, input_file: Optional[str], server: bool = False, verbose: bool = False):
        """
        Args:
            input_file: Path to the introspection XML, or None to read stdin
            server: Generate server traits instead of client proxies
            verbose: Whether to print debug information (default: False)
        """
        self.input_file = input_file
        self.server = server
        self.verbose = verbose
        self.interfaces: List[InterfaceDescription] = []
        self.warnings: List[str] = []

    def _debug(self, message: str):
        if self.verbose:
            print(f"[DEBUG] {message}", file=sys.stderr)

    def parse_input(self) -> bool:
        """
        Parse the introspection document.

        Returns:
            bool: True if parsing was successful, False otherwise
        """
        try:
            if self.input_file:
                self._debug(f"Reading {self.input_file}")
                self.interfaces = load_introspection_file(self.input_file)
            else:
                self._debug("Reading introspection XML from stdin")
                self.interfaces = parse_introspection_xml(sys.stdin.read(), source="<stdin>")
        except (OSError, IntrospectionError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return False
        self._debug(f"Found {len(self.interfaces)} interface(s): {', '.join(i.name for i in self.interfaces)}")
        return True

    def generate(self) -> Optional[str]:
        """
        Generate the Rust code for all parsed interfaces.

        Returns:
            The generated code, or None if a signature was malformed
        """
        self.warnings = []
        try:
            if self.server:
                return generate_server_traits(self.interfaces, self.warnings, self.verbose)
            return generate_client_proxies(self.interfaces, self.warnings, self.verbose)
        except MalformedSignatureError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    def report_warnings(self):
        if self.warnings:
            print("\nWarnings:", file=sys.stderr)
            for warning in self.warnings:
                print(f"  {warning}", file=sys.stderr)


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Generate zbus Rust traits from D-Bus introspection XML",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument('input', nargs='?', help='Introspection XML file (defaults to stdin)')
    parser.add_argument('--server', action='store_true', help='Generate server traits (default is client proxies)')
    parser.add_argument('--output', '-o', help='Write generated code to this file instead of stdout')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output for debugging')
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)

    # Override with environment variables if set
    input_file = os.environ.get('XMLGEN_INPUT_FILE', args.input)
    output_file = os.environ.get('XMLGEN_OUTPUT_FILE', args.output)
    server = args.server
    if 'XMLGEN_SERVER' in os.environ:
        server = os.environ['XMLGEN_SERVER'].strip().lower() in TRUTHY
    verbose = args.verbose
    if 'XMLGEN_VERBOSE' in os.environ:
        verbose = os.environ['XMLGEN_VERBOSE'].strip().lower() in TRUTHY

    converter = IntrospectionConverter(input_file, server, verbose)
    if not converter.parse_input():
        sys.exit(1)

    code = converter.generate()
    if code is None:
        sys.exit(1)
    converter.report_warnings()

    if output_file:
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(code)
        print(f"Wrote {output_file}", file=sys.stderr)
    else:
        sys.stdout.write(code)


if __name__ == '__main__':
    main()
