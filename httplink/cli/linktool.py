# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""httplink is a command-line tool for checking and reformatting values of
the HTTP Link header"""

import argparse
import json
import logging
import sys

import httplink
import httplink.defaults
import httplink.meta
from httplink.util.cli import ActionNoYes, add_verbosity_arguments, configure_logging

log = logging.getLogger("httplink.linktool")


def build_parser():
    p = argparse.ArgumentParser(description=__doc__)
    add_verbosity_arguments(p)
    p.add_argument(
        "--version", action="version", version="%(prog)s " + httplink.meta.version
    )
    p.add_argument(
        "--color",
        help="Color output (default on TTYs if all required modules are installed)",
        default=None,
        action=ActionNoYes,
    )
    p.add_argument(
        "--pretty-print",
        help="Show one link per line (default on TTYs if all required modules are installed)",
        default=None,
        action=ActionNoYes,
    )
    p.add_argument(
        "--json",
        help="Show the links as JSON list of [uri, {name: value}] pairs",
        action="store_true",
    )
    p.add_argument(
        "--from-json",
        help="Read the input as JSON in the format produced by --json rather than as header value",
        action="store_true",
    )
    p.add_argument(
        "--param",
        help="Only show the value of the NAME parameter of each link, one per line (empty if absent)",
        metavar="NAME",
    )
    p.add_argument(
        "value",
        help="Link header value to process; read from standard input if absent or '-'",
        nargs="?",
    )
    return p


def colored(text, options, tokenlambda):
    """Apply pygments based coloring if options.color is set. Tokelambda is a
    callback to which pygments.token is passed and which returns a token type;
    this makes it easy to not need to conditionally react to pygments' possible
    absence in all color locations."""
    if not options.color:
        return str(text)

    from pygments.formatters import TerminalFormatter
    from pygments import token, format

    return format(
        [(tokenlambda(token), str(text))],
        TerminalFormatter(),
    )


def read_input(options, stdin):
    if options.value is not None and options.value != "-":
        return options.value
    text = stdin.read()
    return text.rstrip("\r\n")


def load(text, options):
    """Build a Link from the input text as configured in the options, or raise
    httplink.error.Error or ValueError"""
    if options.from_json:
        try:
            data = json.loads(text)
            return httplink.Link.from_py(data)
        except TypeError as e:
            raise ValueError("JSON input is not a list of [uri, {name: value}] pairs") from e
    return httplink.Link.parse(text)


def present(link, options, file):
    """Write a link header to the output, pretty printing and/or coloring it
    as configured in the options."""
    if options.param is not None:
        for item in link:
            value = item.param(options.param)
            print(value if value is not None else "", file=file)
        return

    lexer_name = "link-header"
    if options.json:
        lexer_name = "json"
        text = json.dumps(link.to_py(), indent=4 if options.pretty_print else None)
    elif options.pretty_print:
        from httplink.util.prettyprint import pretty_print

        (infos, lexer_name, text) = pretty_print(str(link))
        for i in infos:
            log.info("Pretty printer: %s", i)
    else:
        text = str(link)

    if options.color:
        from httplink.util.prettyprint import highlight

        highlit = highlight(text, lexer_name)
        # The TerminalFormatter already adds an end-of-line character
        print(highlit, file=file, end="" if highlit.endswith("\n") else "\n")
    else:
        print(text, file=file)


def main(args=None, *, stdin=None, stdout=None):
    """Run the tool and return its exit code"""
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    parser = build_parser()
    options = parser.parse_args(args)

    if options.color is None:
        options.color = httplink.defaults.use_color()

    configure_logging(options.verbose - options.quiet, options.color)

    pretty_print_modules = httplink.defaults.prettyprint_missing_modules()
    if pretty_print_modules and (options.color is True or options.pretty_print is True):
        parser.error(
            "Color and pretty printing require the following modules which are not installed: %s"
            % ", ".join(pretty_print_modules)
        )

    if options.color is None:
        options.color = stdout.isatty() and not pretty_print_modules
    if options.pretty_print is None:
        options.pretty_print = stdout.isatty() and not pretty_print_modules

    text = read_input(options, stdin)
    log.debug("Processing input %r", text)

    try:
        link = load(text, options)
    except (httplink.error.Error, ValueError) as e:
        log.error("%s", e)
        if isinstance(e, httplink.error.HelpfulError):
            extra_help = e.extra_help(hints={"original_text": text})
            if extra_help:
                print(
                    colored(extra_help, options, lambda token: token.Comment),
                    file=sys.stderr,
                )
        return 1

    log.info("Parsed %d link(s)", len(link))
    present(link, options, stdout)
    return 0


def sync_main(args=None):
    sys.exit(main(args))


if __name__ == "__main__":
    sync_main()
