"""
A module that breaks a paragraph of words into lines using a minimum
    raggedness variant of the Knuth-Plass algorithm.

Unlike a greedy line breaker, which puts as many words on each line as it can
    before moving on to the next line, this module looks at the paragraph as
    a whole and picks the line breaks that minimize the total "badness" of the
    paragraph.

The badness of a line is the cube of its slack (how much width is left unused
    at the end of the line). The last line of the paragraph is free because a
    short last line is normal. Cubing the slack means that one very loose line
    costs much more than a couple of slightly loose ones, so the lines of the
    resulting paragraph come out with roughly even right edges.

There are 2 main parts to the algorithm:
    Part 1: Filling in the cost table. Every prefix position 0..n of the
        paragraph gets the minimum cost of breaking the words before it into
        lines, and the start of the last line in that minimum-cost breaking.
        This is a shortest path over a DAG: nodes are prefix positions, edges
        are lines that fit in the width, and an edge costs the line's penalty.

    Part 2: Walking the back-pointers from the end of the paragraph to the
        start to get the positions of the line breaks, then joining the words
        of each line with a single space.

Every word is assumed to be `word_len(word)` units wide (the number of
    characters by default) and the space between two words is always exactly
    1 unit wide. Words are never split, so a word wider than the line is
    put on a line by itself and allowed to stick out past the width.
"""
import logging
from typing import Callable, List, Optional, Sequence
from tools import profile

logger = logging.getLogger(__name__)

SPACE = 1          # width of the separator between two words on a line
UNREACHABLE = None # cost of a prefix position that no line breaking reaches yet

# =============================================================================
# Helpers
# -----------------------------------------------------------------------------

def prefix_lengths(lengths:Sequence[int]) -> List[int]:
    """
    Returns the prefix-length table for the given word lengths i.e. a list
        `offsets` of len(lengths) + 1 integers where offsets[i] is the sum of
        the lengths of the first i words.
    """
    offsets = [0]
    for length in lengths:
        offsets.append(offsets[-1] + length)
    return offsets

def rendered_width(offsets:List[int], i:int, j:int, space:int=SPACE) -> int:
    """
    The width of a line holding words [i, j) with `space` units between each
        pair of words.
    """
    return offsets[j] - offsets[i] + (j - i - 1) * space

def line_penalty(slack:int, last:bool) -> int:
    """
    The penalty for a line with `slack` units of unused width. The last line
        of a paragraph costs nothing.
    """
    if last:
        return 0

    # Only a lone word that is wider than the line has negative slack. It
    #   cannot be helped, so it is not penalized.
    slack = max(slack, 0)
    return slack * slack * slack

# =============================================================================
# The Algorithm
# -----------------------------------------------------------------------------

def breaks_for_lengths(lengths:Sequence[int], width:int, space:int=SPACE) -> List[int]:
    """
    Runs the line breaking algorithm on a paragraph of words that have the
        given lengths and returns the positions of the optimal line breaks.

    The result is a list `0 = b0 < b1 < ... < bk = n` where each consecutive
        pair (b_t, b_t+1) is one line holding words [b_t, b_t+1). An empty
        list is returned if there are no words or if the width is not
        positive.

    When two breakings of the paragraph cost the same, the one whose last line
        starts earliest wins, so the result is always the same for the same
        input.
    """
    n = len(lengths)
    if width <= 0 or n == 0:
        return []

    offsets = prefix_lengths(lengths)

    # These two are parallel arrays. minima[j] is the minimum cost of breaking
    #   words [0, j) into lines and breaks[j] is where the last line of that
    #   breaking starts.
    minima:List[Optional[int]] = [UNREACHABLE] * (n + 1)
    breaks:List[int] = [0] * (n + 1)
    minima[0] = 0

    for i in range(n):
        if minima[i] is UNREACHABLE:
            continue

        for j in range(i + 1, n + 1):
            total = rendered_width(offsets, i, j, space)

            # Lines only get wider as j grows, so once a line is too wide no
            #   later j will fit either. A word on its own is always allowed.
            if total > width and j > i + 1:
                break

            cost = minima[i] + line_penalty(width - total, j == n)

            if minima[j] is UNREACHABLE or cost < minima[j]:
                minima[j] = cost
                breaks[j] = i

            if total > width:
                break

    # Walk backwards from the end of the paragraph to get the line breaks
    positions = [n]
    j = n
    while j > 0:
        j = breaks[j]
        positions.append(j)
    positions.reverse()

    logger.debug('broke %d words into %d lines of width %d with cost %d',
            n, len(positions) - 1, width, minima[n])

    return positions

@profile()
def knuth_plass_breaks(words:Sequence[str], width:int, word_len:Callable[[str], int]=len) -> List[int]:
    """
    Returns the positions of the optimal line breaks for the given words. See
        breaks_for_lengths() for what the positions mean.

    word_len: Measures how wide a word is. By default, every character is
        1 unit wide.
    """
    return breaks_for_lengths([word_len(word) for word in words], width)

def knuth_plass_lines(words:Sequence[str], width:int, word_len:Callable[[str], int]=len) -> List[List[str]]:
    """
    Breaks the given words into lines and returns the lines as lists of words.
    """
    words = list(words)
    positions = knuth_plass_breaks(words, width, word_len)
    return [words[start:end] for start, end in zip(positions, positions[1:])]

def knuth_plass(
        words:Sequence[str],
        width:int,
        space_char:str=' ',
        word_len:Callable[[str], int]=len,
    ) -> List[str]:
    """
    Breaks the given words into lines no wider than `width` and returns the
        lines as strings, each one the words of the line joined by
        `space_char`.

    words: The words of the paragraph in order. Every string is taken to be
        1 word, so nothing in it is changed and/or removed.

    width: The inclusive width to fit the words in. If it is not positive, an
        empty list is returned no matter what the words are, so check the
        width before calling this if an empty result needs to mean "no words".

    space_char: The separator put between two words on a line. It always
        counts as 1 unit of width.

    word_len: Measures how wide a word is. By default, every character is
        1 unit wide.
    """
    return [space_char.join(line) for line in knuth_plass_lines(words, width, word_len)]

# =============================================================================
# Methods for inspecting the results
# -----------------------------------------------------------------------------

def paragraph_penalty(
        lines:Sequence[Sequence[str]],
        width:int,
        word_len:Callable[[str], int]=len,
        space:int=SPACE,
    ) -> int:
    """
    Returns the total penalty of a paragraph that has already been broken into
        lines (lists of words), no matter which algorithm broke it. This is the
        number knuth_plass() minimizes, so it can be used to compare its
        results against other line breakers.
    """
    total = 0
    for num, line in enumerate(lines):
        offsets = prefix_lengths([word_len(word) for word in line])
        slack = width - rendered_width(offsets, 0, len(line), space)
        total += line_penalty(slack, num == len(lines) - 1)
    return total

def make_words(text:str) -> List[str]:
    """
    Splits the given text into words on whitespace.
    """
    return text.split()

# =============================================================================
# Main
# -----------------------------------------------------------------------------

def main():
    short_text = """Among other public buildings in a certain town, which for many reasons it will be prudent to refrain from mentioning, and to which I will assign no fictitious name, there is one anciently common to most towns, great or small: to wit, a workhouse; and in this workhouse was born; on a day and date which I need not trouble myself to repeat, inasmuch as it can be of no possible consequence to the reader, in this stage of the business at all events; the item of mortality whose name is prefixed to the head of this chapter."""

    from rigid_greedy import rigid_greedy_break, rigid_left_justify

    width = 60
    words = make_words(short_text)

    print()
    print("KNUTH-PLASS")
    print("===========")
    lines = knuth_plass_lines(words, width)
    print(rigid_left_justify(lines, width, end_mark='|'))
    print('Cost: ', paragraph_penalty(lines, width))

    print()
    print("GREEDY")
    print("======")
    lines = rigid_greedy_break(words, width)
    print(rigid_left_justify(lines, width, end_mark='|'))
    print('Cost: ', paragraph_penalty(lines, width))


if __name__ == "__main__":
    main()
