from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

from pydantic import BaseModel, Field, RootModel, field_validator


logger = logging.getLogger(__name__)

KEY_SEPARATOR = "."


def _check_tree(node: Mapping[str, Any], prefix: str = "") -> None:
    for key, value in node.items():
        path = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key
        if KEY_SEPARATOR in key:
            raise ValueError(f"Key '{path}' must not contain '{KEY_SEPARATOR}'")
        if isinstance(value, dict):
            _check_tree(value, path)
        elif not isinstance(value, str):
            raise ValueError(f"'{path}' must be a string or an object, got {type(value).__name__}")


class TranslationTree(RootModel[Dict[str, Any]]):
    """
    언어별 번역 문서의 올바른 형태.
    값은 문자열(leaf) 또는 하위 객체(namespace)
    """

    @field_validator("root")
    @classmethod
    def check_shape(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        _check_tree(value)
        return value


class ElementData(BaseModel):
    id: str
    key: Optional[str] = None # data-i18n 속성
    content: str = ""


class PageData(BaseModel):
    lang: str = ""
    title: str = ""
    elements: List[ElementData] = Field(default_factory=list)


def resolve_key_path(document: Mapping[str, Any], key: str) -> Optional[str]:
    """
    점으로 구분된 key path를 문서 루트부터 따라가 문자열 leaf를 반환.
    경로가 끊기거나 leaf가 문자열이 아니면 None
    """
    current: Any = document
    for segment in key.split(KEY_SEPARATOR):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]

    if isinstance(current, str) and current:
        return current
    return None


def collect_key_paths(tree: Mapping[str, Any], prefix: str = "") -> List[str]:
    """문서 안의 모든 leaf key path 목록"""
    paths: List[str] = []
    for key, value in tree.items():
        path = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key
        if isinstance(value, Mapping):
            paths.extend(collect_key_paths(value, path))
        else:
            paths.append(path)
    return paths


def compare_structures(reference: Mapping[str, Any], other: Mapping[str, Any]) -> Tuple[List[str], List[str]]:
    """
    두 문서의 key 구조 비교.
    (reference에는 있지만 other에 없는 경로, other에만 있는 경로)
    """
    reference_paths = set(collect_key_paths(reference))
    other_paths = set(collect_key_paths(other))
    missing = sorted(reference_paths - other_paths)
    extra = sorted(other_paths - reference_paths)
    return missing, extra
