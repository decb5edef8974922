"""Tag helpers that treat ``bpmn:X`` and bare ``X`` as the same element."""
from typing import Iterator

from lxml import etree

from ..config import Config


def local_name(element) -> str:
    """Local part of an element's tag, '' for comments and processing instructions."""
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def iter_tagged(root, name: str) -> Iterator:
    """Iterate ``name`` elements below ``root``, namespaced spelling first.

    Lookup order: the BPMN model namespace, then any other namespace (a
    ``bpmn:`` or ``bpmn2:`` prefix bound to a vendor URI), then the bare
    namespace-less spelling. The first tier with a match wins.
    """
    namespaced = list(root.iter(f"{{{Config.BPMN_NAMESPACE}}}{name}"))
    if namespaced:
        return iter(namespaced)
    other = [el for el in root.iter(f"{{*}}{name}") if etree.QName(el).namespace]
    if other:
        return iter(other)
    return root.iter(name)


def first_tagged(root, name: str):
    return next(iter_tagged(root, name), None)
