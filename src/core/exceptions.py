"""
Glossary-Term-Service - Custom Exceptions

Anti-Patterns Avoided:
- Exception Shadowing: namespaced exceptions rooted at GlossaryServiceError
  instead of reusing builtins like LookupError or ValueError
"""


class GlossaryServiceError(Exception):
    """Base exception for Glossary-Term-Service.

    All custom exceptions inherit from this base class.
    """
    pass


class CatalogLoadError(GlossaryServiceError):
    """Raised when the static catalog definition cannot be loaded.

    Covers unreadable files, malformed JSON, missing or mistyped fields,
    unknown difficulty values and duplicate term ids. Fatal at startup.
    """
    pass


class TermNotFoundError(GlossaryServiceError):
    """Raised when a term id does not exist in the catalog.

    Attributes:
        term_id: The id that was requested.
    """

    def __init__(self, term_id: str) -> None:
        super().__init__(f"Term not found: {term_id}")
        self.term_id = term_id
