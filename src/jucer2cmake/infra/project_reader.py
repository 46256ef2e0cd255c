from __future__ import annotations

"""
Project Descriptor Reader.

Parses a .jucer XML document into the immutable ProjectNode tree consumed
by the translators. Element tags become node types and attributes become
string properties, both in document order.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Tuple

from jucer2cmake.domain.constants import ROOT_TAG
from jucer2cmake.domain.errors import ProjectFileError
from jucer2cmake.domain.project_models import ProjectNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_project(path: str) -> ProjectNode:
    """
    Read and validate a project descriptor from disk.

    Args:
        path: Path of the .jucer file.

    Returns:
        ProjectNode: Root node of type JUCERPROJECT.

    Raises:
        ProjectFileError: If the file is unreadable, malformed or has
                          an unexpected root element.
    """
    try:
        tree = ET.parse(path)
    except OSError as e:
        logger.debug(f"Cannot open project file '{path}': {e}")
        raise ProjectFileError(path, str(e)) from e
    except ET.ParseError as e:
        logger.debug(f"Malformed project file '{path}': {e}")
        raise ProjectFileError(path, str(e)) from e

    return _validate_root(tree.getroot(), path)


def parse_project_string(text: str, source: str = "<string>") -> ProjectNode:
    """
    Parse a project descriptor held in memory.

    Args:
        text: XML document content.
        source: Name used in error messages.

    Raises:
        ProjectFileError: If the text is malformed or has an unexpected root.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ProjectFileError(source, str(e)) from e

    return _validate_root(root, source)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _validate_root(root: ET.Element, source: str) -> ProjectNode:
    if root.tag != ROOT_TAG:
        logger.debug(f"Unexpected root element <{root.tag}> in '{source}'")
        raise ProjectFileError(source, f"root element is <{root.tag}>")

    project = _element_to_node(root)
    logger.debug(f"Loaded project '{project.get_string('name')}' from {source}")
    return project


def _element_to_node(root: ET.Element) -> ProjectNode:
    """
    Convert an element tree bottom-up without recursion.

    Each element is visited twice: once to schedule its children and once,
    after all children are built, to build the node itself.
    """
    built: Dict[int, ProjectNode] = {}
    stack: List[Tuple[ET.Element, bool]] = [(root, False)]

    while stack:
        element, children_ready = stack.pop()
        if children_ready:
            built[id(element)] = ProjectNode(
                type=element.tag,
                properties=dict(element.attrib),
                children=tuple(built.pop(id(c)) for c in element),
            )
            continue

        stack.append((element, True))
        stack.extend((c, False) for c in element)

    return built[id(root)]
