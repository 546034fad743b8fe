"""Mount a built tree into a host document."""

from __future__ import annotations

import logging
from xml.dom import minidom

from domsignal.dom import find_by_id, get_document
from domsignal.errors import AlreadyMountedError, MountTargetNotFound

logger = logging.getLogger("domsignal.mount")


def mount(tree: minidom.Element, target: minidom.Element | None) -> minidom.Element:
    """Append tree to target. Each tree is mounted exactly once."""
    if target is None:
        raise MountTargetNotFound("mount target not found")
    if tree.parentNode is not None:
        raise AlreadyMountedError(
            f"<{tree.nodeName}> is already mounted under <{tree.parentNode.nodeName}>"
        )
    target.appendChild(tree)
    logger.info("Mounted <%s> into <%s>", tree.nodeName, target.nodeName)
    return tree


def mount_by_id(
    tree: minidom.Element,
    element_id: str,
    *,
    document: minidom.Document | None = None,
) -> minidom.Element:
    """Mount tree into the element with id element_id."""
    doc = document if document is not None else get_document()
    target = find_by_id(doc, element_id)
    if target is None:
        raise MountTargetNotFound(f"mount target not found: no element with id {element_id!r}")
    return mount(tree, target)
