"""
A greedy line breaker for rigid text i.e. text where every character, spaces
    included, takes up exactly 1 unit of width.

The greedy algorithm is what most text editors do: put as many words on the
    current line as will fit and then start a new line. It is fast, but it
    never looks ahead, so it can leave a very loose line in the middle of the
    paragraph that knuth_plass() would have avoided. It is kept here as the
    baseline knuth_plass() is measured against.
"""
from io import StringIO
from typing import Final, List, Literal, Union

def text_len(text:List[str]) -> int:
    cnt = 0
    for t in text: cnt += len(t)
    return cnt


def rigid_greedy_break(text:Union[str, List[str]], width:int) -> List[List[str]]:
    """
    Greedily breaks the given paragraph into lines of at most `width` units,
        counting every character and every space as 1 unit. Returns the
        lines as lists of words.

    text: The words of the paragraph. A string is split on whitespace, while a
        list is used as it is, every string in it being 1 word that is never
        changed or cut up.

    width: The inclusive width of a line, so with width = 50 no line (words
        plus 1 space between each pair of them) is longer than 50 characters
        unless it holds a single word that is longer than that on its own.
    """
    assert width >= 0, f'Unable To Break Text: The width must be at least 0, not {width}.'

    space:Final[Literal[1]] = 1 # constant used instead of magic number

    words:List[str] = text.split() if isinstance(text, str) else list(text)

    lines:List[List[str]] = [] # each inner list is one line of words, each seperated by spaces
    curr_line:List[str] = []
    curr_line_len:int = 0

    for word in words:
        word_len = len(word)

        if len(curr_line) == 0:
            # There is nothing else on the current line, so the word goes on
            # it even if it is too long for the width
            curr_line.append(word)
            curr_line_len = word_len

        elif curr_line_len + space + word_len > width:
            # Cannot add it to the current line with 1 space before it, so it
            # starts the next line
            lines.append(curr_line)
            curr_line = [word]
            curr_line_len = word_len

        else:
            # Can add it to the line in one piece
            curr_line.append(word)
            curr_line_len += space + word_len

    if len(curr_line) > 0:
        lines.append(curr_line)

    return lines


# -----------------------------------------------------------------------------
# Format Methods
# =============================================================================


def rigid_left_justify(paragraph:List[List[str]], width:int, space_char:str=' ', fill_char:str=' ', line_end:str='\n', end_mark:str='') -> str:
    """
    Left justifies the given paragraph. Every line is padded with `fill_char`
        out to `width` and then ends with `end_mark`, so a visible end mark
        shows where the right margin is.
    """
    text = StringIO()
    for line in paragraph:
        line_str = space_char.join(line)
        text.write(line_str + (fill_char * (width - len(line_str))) + end_mark + line_end)
    return text.getvalue()
