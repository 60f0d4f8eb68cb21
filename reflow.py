#!/usr/bin/python3
# -*- encoding: utf-8 -*-

import os
import re
import sys
import logging
import argparse
import textwrap

from divide import InvalidWidth, breaks, greedy

__all__ = ["tokenize", "paragraphs", "read_words", "render_lines", "render",
           "overflowing", "reflow", "main"]

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 72
METHODS = ("optimal", "greedy")

# -l 0..5, the same scale the zhban demo used for its C library
LOGLEVELS = (logging.CRITICAL, logging.ERROR, logging.WARNING,
             logging.INFO, logging.DEBUG, logging.DEBUG)

def tokenize(text):
    return text.split()

def paragraphs(text):
    """ split on blank lines; paragraphs with no words are dropped """
    rv = []
    for para in re.split(r"\n\s*\n", text):
        words = tokenize(para)
        if words:
            rv.append(words)
    return rv

def read_words(path, encoding="utf-8"):
    with open(path, "r", encoding=encoding) as f:
        return tokenize(f.read())

def render_lines(words, bl):
    if not words:
        return []
    lines = []
    i = 0
    for j in list(bl) + [len(words)]:
        if not i < j <= len(words):
            raise ValueError("break list {!r} is not strictly increasing within (0, {})".format(bl, len(words)))
        lines.append(" ".join(words[i:j]))
        i = j
    return lines

def render(words, bl):
    return "\n".join(render_lines(words, bl))

def overflowing(lines, width):
    return [n for n, line in enumerate(lines) if len(line) > width]

def _wrap(words, width, method, free_last):
    lengths = [len(w) for w in words]
    if method == "greedy":
        bl = greedy(lengths, width)
    elif method == "optimal":
        bl, total = breaks(lengths, width, free_last)
        log.info("%d words, %d lines, badness %d", len(words), len(bl) + 1, total)
    else:
        raise ValueError("unknown method '{}'".format(method))
    lines = render_lines(words, bl)
    for n in overflowing(lines, width):
        log.warning("line %d is %d characters, wider than %d: %r", n + 1, len(lines[n]), width, lines[n])
    return lines

def reflow(text, width, method="optimal", keep_paragraphs=False, free_last=False):
    """ Rewrap text to width; paragraphs, when kept, are separated by a blank line. """
    if keep_paragraphs:
        paras = paragraphs(text)
    else:
        paras = [tokenize(text)]
    out = []
    for words in paras:
        out.append("\n".join(_wrap(words, width, method, free_last)))
    return "\n\n".join(out)

def main(argv=None):
    ap = argparse.ArgumentParser(prog="reflow", formatter_class=argparse.RawDescriptionHelpFormatter,
        description="Wrap text to a fixed width, minimizing the sum of squared trailing space.",
        epilog=textwrap.dedent("""
    environment:
        REFLOW_WIDTH - default line width when -w is not given"""))
    ap.add_argument('-w', type=str, metavar='width', default=None, help='line width in characters')
    ap.add_argument('-f', type=str, metavar='text.file', help='text file (utf-8)')
    ap.add_argument('-m', type=str, metavar='method', choices=METHODS, default='optimal',
        help='linebreaking algorithm: optimal or greedy')
    ap.add_argument('-p', action='store_true', help='keep blank-line separated paragraphs')
    ap.add_argument('-free-last', action='store_true', help='do not charge trailing space on the last line')
    ap.add_argument('-l', type=int, metavar='loglevel', default=2, choices=range(6), help='log level (0-5)')
    ap.add_argument('words', nargs='*', default=[])
    pa = ap.parse_args(argv)

    logging.basicConfig(level=LOGLEVELS[pa.l], format="%(levelname)s %(name)s: %(message)s")

    width = pa.w if pa.w is not None else os.environ.get('REFLOW_WIDTH', str(DEFAULT_WIDTH))
    try:
        width = int(width)
    except ValueError:
        ap.error("line width must be a positive integer, got '{}'".format(width))

    if pa.f is None:
        if len(pa.words) == 0:
            ap.error("text file or words as arguments are required")
        text = ' '.join(pa.words)
    else:
        try:
            with open(pa.f, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            ap.error("could not open file '{}': {}".format(pa.f, e.strerror))

    try:
        out = reflow(text, width, pa.m, pa.p, pa.free_last)
    except InvalidWidth as e:
        ap.error(str(e))

    if out:
        sys.stdout.write(out + "\n")
    return 0

if __name__ == '__main__':
    sys.exit(main())
