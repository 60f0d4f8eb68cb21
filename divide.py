#!/usr/bin/python3

""" Minimum raggedness line breaking: backward dynamic program over word suffixes.

Break indices run from 0 to n; a line [i, j) holds words i..j-1.
"""

import logging

__all__ = ["INFEASIBLE", "InvalidWidth", "offsets", "cost", "infeasible_cost",
           "solve", "reconstruct", "breaks", "greedy", "divide"]

log = logging.getLogger(__name__)

# cost of an overflowing line; large enough to dominate any sum of slack
# squares for realistic input, see infeasible_cost() for the general bound
INFEASIBLE = 10 ** 18

class InvalidWidth(ValueError):
    pass

def _check_width(width):
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise InvalidWidth("line width must be a positive integer, got {!r}".format(width))

def offsets(lengths):
    """ prefix sums of word lengths: offs[j] - offs[i] is the text of words i..j-1 """
    offs = [0]
    for length in lengths:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise ValueError("word length must be a non-negative integer, got {!r}".format(length))
        offs.append(offs[-1] + length)
    return offs

def infeasible_cost(count, width):
    """ Overflow penalty for a problem of `count` words at `width`.

    Every feasible line costs at most width ** 2, so any partition without
    overflowing lines totals at most count * width ** 2. The penalty has to
    exceed that, which makes the optimum minimize the number of overflowing
    lines first and the slack squares second.
    """
    return max(INFEASIBLE, count * width * width + 1)

def cost(offs, i, j, width, infeasible=INFEASIBLE):
    """ Badness of the line holding words i..j-1.

    `offs` is the output of offsets(). An empty line costs 0, a line that
    fits costs its slack squared, an overflowing one costs `infeasible`.
    """
    _check_width(width)
    if not 0 <= i <= j < len(offs):
        raise ValueError("invalid line [{}, {}) for {} words".format(i, j, len(offs) - 1))
    if i == j:
        return 0
    slack = width - (offs[j] - offs[i] + j - i - 1)
    if slack < 0:
        return infeasible
    return slack * slack

def solve(lengths, width, free_last=False):
    """ Compute (psi, nxt) for word lengths at the given width.

    psi[i] is the least total badness of breaking words i..n-1 and nxt[i] the
    end of the first line of such a breaking. psi[n] is 0 and nxt[n] is n.
    Among equally good first lines the shortest one (smallest j) wins.

    With free_last the line ending at n costs nothing as long as it fits.
    """
    _check_width(width)
    offs = offsets(lengths)
    count = len(offs) - 1
    infeasible = infeasible_cost(count, width)

    psi = [0] * (count + 1)
    nxt = [count] * (count + 1)
    for i in range(count - 1, -1, -1):
        best = None
        for j in range(i + 1, count + 1):
            c = cost(offs, i, j, width, infeasible)
            if free_last and j == count and c != infeasible:
                c = 0
            total = c + psi[j]
            # strict comparison keeps the smallest j on ties
            if best is None or total < best:
                best = total
                nxt[i] = j
        psi[i] = best

    if log.isEnabledFor(logging.DEBUG):
        log.debug("psi: %r", psi)
        log.debug("next: %r", nxt)
    return psi, nxt

def reconstruct(nxt, count):
    """ Walk the choice table from 0 and return the internal break indices. """
    if len(nxt) < count:
        raise ValueError("choice table has {} entries for {} words".format(len(nxt), count))
    rv = []
    i = 0
    while i < count:
        j = nxt[i]
        if not i < j <= count:
            raise ValueError("choice table makes no progress at {}: next is {}".format(i, j))
        if j < count:
            rv.append(j)
        i = j
    return rv

def breaks(lengths, width, free_last=False):
    """ Optimal break list and its total badness. """
    psi, nxt = solve(lengths, width, free_last)
    count = len(psi) - 1
    return reconstruct(nxt, count), psi[0]

def greedy(lengths, width):
    """ First fit: put as many words on each line as will go. """
    _check_width(width)
    offs = offsets(lengths)
    count = len(offs) - 1
    rv = []
    i = 0
    for j in range(1, count + 1):
        if j - 1 > i and offs[j] - offs[i] + j - i - 1 > width:
            rv.append(j - 1)
            i = j - 1
    return rv

def divide(words, width, wordlen=len, method=None, free_last=False):
    """ Group words into lines; returns a list of lists of words. """
    lengths = [wordlen(w) for w in words]
    if method is greedy:
        bl = greedy(lengths, width)
    else:
        bl, total = breaks(lengths, width, free_last)
    lines = []
    i = 0
    for j in bl + [len(words)]:
        if j > i:
            lines.append(words[i:j])
        i = j
    return lines
