"""
Loading and validation of authored interview content.

Content files are YAML documents holding the question table, the ending table
and optional office flavor. Every playthrough in a process shares one loaded
ContentModel; the registry caches them by resolved path.
"""
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from last_interview.constants import DEFAULT_CONTENT
from last_interview.core.errors import ContentError
from last_interview.schemas.content import ContentModel, SpecificAnswer

logger = logging.getLogger(__name__)


def _duplicates(ids: List[str]) -> List[str]:
    return sorted(i for i, count in Counter(ids).items() if count > 1)


def find_content_problems(content: ContentModel) -> List[str]:
    """Collect every cross-reference problem in a content set.

    Args:
        content: Parsed content

    Returns:
        List of human readable problems, empty when the content is valid
    """
    problems = []
    question_ids = [q.id for q in content.questions]
    known_questions = set(question_ids)
    answer_ids = content.answer_ids()
    known_answers = set(answer_ids)

    for dup in _duplicates(question_ids):
        problems.append(f"Duplicate question id: {dup}")
    for dup in _duplicates(answer_ids):
        problems.append(f"Duplicate answer id: {dup}")
    for dup in _duplicates([e.id for e in content.endings]):
        problems.append(f"Duplicate ending id: {dup}")

    for question in content.questions:
        if question.contradicts_question_id is not None:
            if question.contradicts_question_id == question.id:
                problems.append(f"Question {question.id} contradicts itself")
            elif question.contradicts_question_id not in known_questions:
                problems.append(f"Question {question.id} contradicts unknown question "
                                f"{question.contradicts_question_id}")
        for condition in question.unlock_conditions:
            if isinstance(condition, SpecificAnswer) and condition.related_question_id not in known_questions:
                problems.append(f"Question {question.id} depends on unknown question "
                                f"{condition.related_question_id}")

    for ending in content.endings:
        for answer_id in ending.condition.required_answer_ids:
            if answer_id not in known_answers:
                problems.append(f"Ending {ending.id} requires unknown answer {answer_id}")

    if content.default_ending is not None and content.get_ending(content.default_ending) is None:
        problems.append(f"Default ending {content.default_ending} is not in the ending table")

    if not any(e.condition.is_unconditioned for e in content.endings):
        problems.append("Ending table has no catch-all ending (an ending without conditions)")

    return problems


def validate_content(content: ContentModel) -> ContentModel:
    """Raise ContentError unless the content is safe to start a playthrough with"""
    problems = find_content_problems(content)
    if problems:
        logger.error(f"Content '{content.title}' has {len(problems)} problem(s)")
        raise ContentError(f"Invalid content '{content.title}'", problems)

    catch_all = next(i for i, e in enumerate(content.endings) if e.condition.is_unconditioned)
    unreachable = [e.id for e in content.endings[catch_all + 1:]]
    if unreachable:
        logger.warning(f"Endings after catch-all {content.endings[catch_all].id} can never be "
                       f"reached: {', '.join(unreachable)}")
    return content


def parse_content(data: Dict) -> ContentModel:
    """Build and validate a ContentModel from already-parsed YAML/JSON data"""
    if not isinstance(data, dict):
        raise ContentError("Content must be a mapping with 'questions' and 'endings'")
    try:
        content = ContentModel.model_validate(data)
    except ValidationError as e:
        raise ContentError("Malformed content", [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]) from e
    return validate_content(content)


def load_content(path: Union[str, Path] = DEFAULT_CONTENT) -> ContentModel:
    """Load and validate a YAML content file.

    Raises:
        FileNotFoundError: If the file does not exist
        ContentError: If the file is not valid YAML or the content is malformed
    """
    path = Path(path)
    if not path.exists():
        logger.error(f"Content file not found: {path}")
        raise FileNotFoundError(f"Content file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ContentError(f"Content file is not valid YAML: {path}: {e}") from e

    content = parse_content(data)
    logger.debug(f"Loaded {len(content.questions)} questions and {len(content.endings)} endings "
                 f"from {path}")
    return content


class ContentRegistry:
    """Caches loaded content by resolved path"""

    def __init__(self):
        self._content: Dict[Path, ContentModel] = {}

    def get(self, path: Union[str, Path] = DEFAULT_CONTENT, reload: bool = False) -> ContentModel:
        """Get content for a path, loading it on first use"""
        key = Path(path).resolve()
        if reload or key not in self._content:
            self._content[key] = load_content(key)
        return self._content[key]

    def clear(self) -> None:
        self._content = {}

    def __contains__(self, path: Union[str, Path]) -> bool:
        return Path(path).resolve() in self._content


_registry: Optional[ContentRegistry] = None


def get_registry(reset_cache: bool = False) -> ContentRegistry:
    """Get the process-wide content registry"""
    global _registry
    if _registry is None or reset_cache:
        _registry = ContentRegistry()
    return _registry
