from __future__ import annotations

CLEAN_PARAGRAPH = (
    "Morning light crept across the quiet harbor while fishermen prepared their "
    "boats. Gulls circled overhead and waited for scraps from the early catch."
)

SECOND_CLEAN_PARAGRAPH = (
    "The village market opened at noon. Traders sold bread and cheese to visitors "
    "who arrived by ferry."
)

CLEAN_TEXT = CLEAN_PARAGRAPH + "\n\n" + SECOND_CLEAN_PARAGRAPH

CITED_TEXT = (
    "Barack Obama (2008). The Audacity of Hope is widely cited. (Smith, 2010) "
    "argues something else. Researchers continue to debate how political memoirs "
    "shape public opinion over time."
)

MESSY_TEXT = (
    "We could of planned better, and the the schedule slipped. The report was "
    "written in a hurry due to the fact that the deadline moved.\n\n"
    "There is many things we did not accomodate , and it showed. In order to "
    "recover we must seperate the tasks (Jones, 2019).\n\n"
    "Next quarter the team will definately meet every milestone."
)


def words(count: int, word: str = "word") -> str:
    """Return ``count`` space-separated copies of ``word``."""
    return " ".join([word] * count)
