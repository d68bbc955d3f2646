# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0
"""
secpass CLI - hash and verify passwords from the shell

Usage:
    # Prompt for a password and print the stored artifact
    secpass hash

    # Read the password from stdin (for scripts)
    printf '%s\\n' "$PASSWORD" | secpass hash --stdin

    # Check a guess against a stored artifact
    secpass verify <artifact>

Exit codes for verify:
    0 - guess matches
    1 - guess does not match
    2 - stored artifact could not be decoded
"""

import argparse
import getpass
import sys
from typing import List, Optional

from secpass.auth.artifact import ArtifactError
from secpass.exports import get_export
from secpass.logging_config import bind_context, clear_context, configure_logging

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_BAD_ARTIFACT = 2


def read_secret(args: argparse.Namespace, value: Optional[str], prompt: str) -> str:
    """Resolve a secret from the command line, stdin, or an interactive prompt.

    Args:
        args: Parsed arguments (checked for --stdin)
        value: Value given on the command line, if any
        prompt: Prompt shown by getpass

    Returns:
        str: The secret (may be empty)
    """
    if value is not None:
        return value
    if args.stdin:
        return sys.stdin.readline().rstrip("\r\n")
    return getpass.getpass(prompt)


def cmd_hash(args: argparse.Namespace) -> int:
    """Hash a password and print the artifact."""
    password = read_secret(args, args.password, "Password: ")
    print(get_export("hashPassword")(password))
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify a guess against a stored artifact."""
    guess = read_secret(args, args.guess, "Password: ")
    try:
        matched = get_export("verifyPassword")(guess, args.stored)
    except ArtifactError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_ARTIFACT

    print("valid" if matched else "invalid")
    return EXIT_MATCH if matched else EXIT_MISMATCH


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="secpass",
        description="Salted PBKDF2 password hashing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  secpass hash
  secpass hash --stdin < password.txt
  secpass verify "$(cat stored.txt)"
  secpass --console-logs verify --stdin "$(cat stored.txt)" < guess.txt

Environment Variables:
  SECPASS_MIN_ITERATIONS  - Lowest generated iteration count (default 10000)
  SECPASS_MAX_ITERATIONS  - Highest generated iteration count (default 50000)
  SECPASS_ITERATION_WIDTH - Bytes used for the stored count, 4 or 8 (default 4)
  SECPASS_LOG_LEVEL       - Log level (default INFO)
  SECPASS_LOG_JSON        - JSON logs unless false (default true)
"""
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: $SECPASS_LOG_LEVEL or INFO)"
    )
    log_format = parser.add_mutually_exclusive_group()
    log_format.add_argument(
        "--json-logs",
        dest="json_logs",
        action="store_const",
        const=True,
        help="Write logs as JSON (default: $SECPASS_LOG_JSON or JSON)"
    )
    log_format.add_argument(
        "--console-logs",
        dest="json_logs",
        action="store_const",
        const=False,
        help="Pretty-print logs instead of JSON"
    )

    # Shared by every subcommand that reads a secret
    secret_input = argparse.ArgumentParser(add_help=False)
    secret_input.add_argument(
        "--stdin",
        action="store_true",
        help="Read the password from the first line of stdin instead of prompting"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # === hash ===
    hash_parser = subparsers.add_parser(
        "hash",
        help="Hash a password",
        parents=[secret_input],
        description="Hash a password and print the base64 artifact."
    )
    hash_parser.add_argument("password", nargs="?", help="Password (will prompt if not provided)")
    hash_parser.set_defaults(func=cmd_hash)

    # === verify ===
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a password against a stored artifact",
        parents=[secret_input],
        description="Check a guess against an artifact produced by 'secpass hash'."
    )
    verify_parser.add_argument("stored", help="Stored base64 artifact")
    verify_parser.add_argument("guess", nargs="?", help="Password guess (will prompt if not provided)")
    verify_parser.set_defaults(func=cmd_verify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.json_logs is not None:
        configure_logging(log_level=args.log_level, json_output=args.json_logs)

    bind_context(command=args.command)
    try:
        return args.func(args)
    finally:
        clear_context()


if __name__ == "__main__":
    sys.exit(main())
