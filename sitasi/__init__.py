"""Citation formatting for the pesantren book catalogue.

Formats bibliographic metadata of a single work in APA, MLA, Chicago and
Harvard styles, and copies a formatted citation to the system clipboard.
"""

__version__ = "0.1.0"
