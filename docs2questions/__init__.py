"""Top-level package for docs2questions.

Turns a PDF into a short list of questions: text is extracted page by page,
the first meaningful sentences are selected, and each enabled strategy asks
one question per sentence.

Auto-initializes global configuration on import. The configuration will be
loaded from the following locations in order of precedence:
1) Path specified by the DOCS2QUESTIONS_CONFIG environment variable
2) ./config.yml in the current working directory
3) Built-in defaults
"""

from importlib import metadata

from .utils.config import get_config  # Auto-loads config on first call
from .utils.logging import get_logger

try:
    __version__: str = metadata.version(__name__)
except metadata.PackageNotFoundError:  # pragma: no cover
    # Package is not installed, default to dev version
    __version__ = "0.0.0.dev0"

logger = get_logger(__name__)

try:
    # Trigger config auto-load (safe: falls back to defaults on failure)
    get_config()
except Exception as _e:  # pragma: no cover
    logger.warning(f"Config auto-initialization failed: {_e}")

from .integration import QuestionPipeline, QuestionSession  # noqa: E402
from .preprocess import (  # noqa: E402
    CorruptDocument,
    PDFPlumberLoader,
    RawDocument,
    UnsupportedFormat,
    extract_text,
)
from .qa import (  # noqa: E402
    GeneratedQuestion,
    GenerationOptions,
    QuestionSynthesizer,
    SentenceSelector,
    StrategyTag,
    format_report,
    select_sentences,
)

__all__ = [
    "__version__",
    "QuestionPipeline",
    "QuestionSession",
    "PDFPlumberLoader",
    "RawDocument",
    "extract_text",
    "UnsupportedFormat",
    "CorruptDocument",
    "SentenceSelector",
    "select_sentences",
    "QuestionSynthesizer",
    "GenerationOptions",
    "GeneratedQuestion",
    "StrategyTag",
    "format_report",
]
