"""Custom exception classes and error handling utilities."""


class CheatSheetError(Exception):
    """Base exception for sql-cheatsheet."""

    pass


class TopicNotFoundError(CheatSheetError):
    """Raised when a keyword is not present in the lookup index."""

    def __init__(self, keyword: str, suggestions: list[str] | None = None):
        self.keyword = keyword
        self.suggestions = suggestions or []
        super().__init__(self._get_default_message())

    def _get_default_message(self) -> str:
        """Generate a not-found message, listing close matches when known."""
        message = f"No topic found for keyword '{self.keyword}'"
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        return message


class CategoryNotFoundError(CheatSheetError):
    """Raised when a category label is not recognized."""

    def __init__(self, category: str, valid_categories: list[str] | None = None):
        self.category = category
        self.valid_categories = valid_categories or []
        message = f"Unknown category '{category}'"
        if self.valid_categories:
            message += f". Valid categories are: {', '.join(self.valid_categories)}"
        super().__init__(message)


class InvalidInputError(CheatSheetError):
    """Raised when content or render input is malformed."""

    pass


class UnsupportedFormatError(InvalidInputError):
    """Raised when an unknown render format is requested."""

    def __init__(self, fmt: str, valid_formats: list[str]):
        self.fmt = fmt
        self.valid_formats = valid_formats
        message = (
            f"Unsupported format '{fmt}'. "
            f"Valid formats are: {', '.join(valid_formats)}"
        )
        super().__init__(message)


class DuplicateTopicError(InvalidInputError):
    """Raised when two entries share a title within one category."""

    def __init__(self, category: str, title: str):
        self.category = category
        self.title = title
        super().__init__(f"Duplicate topic '{title}' in category '{category}'")
