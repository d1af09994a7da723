"""Batch generation over many schema documents.

Translation is a pure function of the document content, so documents
are translated concurrently and results are cached by content hash.
A failure in one document is reported in its own result and never
affects the others.
"""

import hashlib
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .codegen.core.generator import CodeGenerator, GenerationResult, generate_code
from .codegen.core.schema import SchemaDocument
from .logging_config import get_logger

logger = get_logger(__name__)


def content_hash(document: SchemaDocument) -> str:
    """SHA256 of a document's content."""
    return hashlib.sha256(document.content.encode("utf-8")).hexdigest()


class GenerationCache:
    """In-memory cache of generation results keyed by content hash.

    The document name is part of the key, since diagnostics name the
    document they came from.
    """

    def __init__(self):
        self._results: Dict[tuple[str, str], GenerationResult] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, document: SchemaDocument) -> Optional[GenerationResult]:
        key = (document.name, content_hash(document))
        with self._lock:
            result = self._results.get(key)
            if result is None:
                self.misses += 1
            else:
                self.hits += 1
            return result

    def put(self, document: SchemaDocument, result: GenerationResult) -> None:
        key = (document.name, content_hash(document))
        with self._lock:
            self._results[key] = result

    def __len__(self) -> int:
        return len(self._results)


def generate_all(
    generator: CodeGenerator,
    documents: Iterable[SchemaDocument],
    max_workers: int = 4,
    cache: Optional[GenerationCache] = None,
) -> List[GenerationResult]:
    """Translate documents concurrently.

    Args:
        generator: Code generator to use for every document.
        documents: Schema documents to translate.
        max_workers: Thread pool size.
        cache: Optional cache shared across calls.

    Returns:
        One result per document, in input order.
    """
    documents = list(documents)

    def translate_one(document: SchemaDocument) -> GenerationResult:
        if cache is not None:
            cached = cache.get(document)
            if cached is not None:
                logger.debug("Cache hit for %s", document.name)
                return cached

        result = generate_code(generator, document)
        if cache is not None:
            cache.put(document, result)
        return result

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        results = list(executor.map(translate_one, documents))

    generated = sum(1 for r in results if r.success)
    logger.info("Generated %d of %d schema documents", generated, len(results))
    return results


def write_results(results: Iterable[GenerationResult], output_dir: str | Path) -> List[Path]:
    """Write every generated document to output_dir under its artifact name."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    seen: Dict[str, str] = {}
    for result in results:
        if not result.success:
            continue

        artifact_name = result.generated.artifact_name
        if artifact_name in seen:
            logger.warning(
                "%s and %s both generate %s; keeping the first",
                seen[artifact_name],
                result.document_name,
                artifact_name,
            )
            continue
        seen[artifact_name] = result.document_name

        path = output_dir / artifact_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.generated.source_text, encoding="utf-8")
        logger.debug("Wrote %s", path)
        written.append(path)

    return written
