#!/usr/bin/env python3
import argparse
import json
import logging
import sys
import os
from typing import Optional, List, TextIO

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

__version__ = '1.0.0'

logger = logging.getLogger('seqdiff.cli')


class ANSIColors:
    RESET = '\033[0m'
    RED = '\033[31m'


class ColorPrinter:
    def __init__(self, use_color: bool = True, output: Optional[TextIO] = None):
        self.use_color = use_color
        self.output = output or sys.stdout
        self.reset = ANSIColors.RESET if use_color else ''
        self.red = ANSIColors.RED if use_color else ''

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def write(self, text: str):
        self.output.write(text)

    def print_error(self, text: str):
        sys.stderr.write(f"{self.red}Error: {text}{self.reset}\n")


def normalize(items: List[str], ignore_whitespace: bool, ignore_case: bool) -> List[str]:
    if ignore_whitespace:
        items = [item.strip() for item in items]
    if ignore_case:
        items = [item.lower() for item in items]
    return items


def unwrap_result(result):
    """Swap type-tagged JSON values in ``result`` back to the plain decoded values."""
    from fs.reader import unwrap_json_value
    from seqdiff.script import EditScript
    from seqdiff.sectioned import SectionedDiff
    steps = [step._replace(value=unwrap_json_value(step.value)) for step in result]
    if isinstance(result, SectionedDiff):
        return SectionedDiff(steps)
    return EditScript(steps)


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='seqdiff',
            description='Compute the minimal insert/delete script between two sequences',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Examples:
  %(prog)s old.txt new.txt
  %(prog)s --sections old.txt new.txt
  %(prog)s --json --sections old.json new.json
  %(prog)s --lcs -f simple old.txt new.txt
            '''
        )
        parser.add_argument('file1', help='Source sequence')
        parser.add_argument('file2', help='Target sequence')
        parser.add_argument(
            '-f', '--format',
            choices=['compact', 'simple', 'json'],
            default='compact',
            help='Output format (default: compact)'
        )
        parser.add_argument(
            '--sections',
            action='store_true',
            help='Treat blank-line separated blocks (or nested JSON arrays) as sections'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Read inputs as JSON arrays instead of text lines'
        )
        mode_group = parser.add_mutually_exclusive_group()
        mode_group.add_argument(
            '--lcs',
            action='store_true',
            help='Print the longest common subsequence'
        )
        mode_group.add_argument(
            '--reverse',
            action='store_true',
            help='Print the script that turns FILE2 back into FILE1'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Report only whether inputs differ'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write output to file'
        )
        parser.add_argument(
            '--ignore-whitespace',
            action='store_true',
            help='Ignore leading and trailing whitespace of text lines'
        )
        parser.add_argument(
            '--ignore-case',
            action='store_true',
            help='Ignore case differences of text lines'
        )
        parser.add_argument(
            '--log-level',
            default='WARNING',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            help='Logging level (default: WARNING)'
        )
        parser.add_argument(
            '--log-file',
            metavar='FILE',
            help='Also write log records to FILE'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        from setup_logging import setup_logging
        args = self.parser.parse_args(argv)
        setup_logging(level=args.log_level, log_file=args.log_file)
        use_color = not args.no_color and sys.stdout.isatty()
        output_file = None
        if args.output:
            output_file = open(args.output, 'w', encoding='utf-8')
            self.printer = ColorPrinter(use_color=False, output=output_file)
        else:
            self.printer = ColorPrinter(use_color=use_color, output=sys.stdout)
        try:
            result = self._execute(args)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            result = 130
        except (OSError, ValueError) as e:
            logger.debug("run failed", exc_info=True)
            self.printer.print_error(str(e))
            result = 2
        finally:
            if output_file is not None:
                output_file.close()
        return result

    def _execute(self, args) -> int:
        for path in (args.file1, args.file2):
            if not os.path.exists(path):
                self.printer.print_error(f"File not found: {path}")
                return 2
            if os.path.isdir(path):
                self.printer.print_error(f"Is a directory: {path}")
                return 2
        if args.lcs and args.sections:
            self.printer.print_error("--lcs works on flat sequences only")
            return 2
        left = self._load(args, args.file1)
        right = self._load(args, args.file2)
        logger.info("loaded %d and %d items", len(left), len(right))
        if args.lcs:
            return self._print_lcs(args, left, right)
        return self._print_diff(args, left, right)

    def _load(self, args, path: str) -> list:
        from fs.reader import read_file_lines, read_json_sequence, split_sections, wrap_json_values
        if args.json:
            return wrap_json_values(read_json_sequence(path, sectioned=args.sections), args.sections)
        lines = normalize(read_file_lines(path), args.ignore_whitespace, args.ignore_case)
        if args.sections:
            return split_sections(lines)
        return lines

    def _print_lcs(self, args, left: list, right: list) -> int:
        from seqdiff.lcs import longest_common_subsequence
        common = longest_common_subsequence(left, right)
        differ = left != right
        if args.quiet:
            if differ:
                self.printer.print(f"Files {args.file1} and {args.file2} differ")
            return 1 if differ else 0
        for item in common:
            if args.json:
                self.printer.print(json.dumps(item.value, ensure_ascii=False))
            else:
                self.printer.print(str(item))
        return 1 if differ else 0

    def _print_diff(self, args, left: list, right: list) -> int:
        from seqdiff.lcs import diff
        from seqdiff.sectioned import diff_sectioned
        from formatters import FormatterConfig, create_formatter
        if args.sections:
            result = diff_sectioned(right, left) if args.reverse else diff_sectioned(left, right)
        else:
            result = diff(left, right)
            if args.reverse:
                result = result.reversed()
        has_changes = len(result) > 0
        if args.quiet:
            if has_changes:
                self.printer.print(f"Files {args.file1} and {args.file2} differ")
            return 1 if has_changes else 0
        if args.json:
            result = unwrap_result(result)
        config = FormatterConfig(use_color=self.printer.use_color)
        formatter = create_formatter(args.format, config)
        label1, label2 = (args.file2, args.file1) if args.reverse else (args.file1, args.file2)
        self.printer.write(formatter.format(result, label1, label2))
        return 1 if has_changes else 0


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
