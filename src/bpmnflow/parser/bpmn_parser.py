"""BPMN 2.0 XML parsing into a ProcessModel."""
import logging
import re
from pathlib import Path
from typing import IO, Union

from lxml import etree

from ..models.process import ProcessModel
from .builder import ProcessModelBuilder
from .classifier import ElementClassifier
from .exceptions import ProcessNotFoundError
from .signals import SignalCatalog
from .tags import first_tagged

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, IO[bytes]]

_XML_DECLARATION = re.compile(r"^\s*<\?xml\s[^>]*\?>")


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


class BpmnParser:
    """Read a BPMN document and build the process model of its first process."""

    def parse(self, source: Source) -> ProcessModel:
        """Parse a path, raw bytes, XML text or a binary file object."""
        if isinstance(source, bytes):
            return self.parse_bytes(source)
        if isinstance(source, str) and source.lstrip().startswith("<"):
            return self.parse_text(source)
        if isinstance(source, (str, Path)):
            return self.parse_file(source)
        return self.build(etree.parse(source, _xml_parser()).getroot())

    def parse_file(self, path: Union[str, Path]) -> ProcessModel:
        path = Path(path)
        logger.debug("Parsing BPMN file %s", path)
        with path.open("rb") as f:
            tree = etree.parse(f, _xml_parser())
        return self.build(tree.getroot())

    def parse_bytes(self, data: bytes) -> ProcessModel:
        return self.build(etree.fromstring(data, _xml_parser()))

    def parse_text(self, text: str) -> ProcessModel:
        """Parse already decoded XML; its encoding declaration no longer applies."""
        data = _XML_DECLARATION.sub("", text, count=1).encode("utf-8")
        return self.parse_bytes(data)

    def build(self, root) -> ProcessModel:
        """Build the model from an already parsed document root.

        Raises:
            ProcessNotFoundError: no process element under either spelling.
        """
        signals = SignalCatalog.build(root)

        process = first_tagged(root, "process")
        if process is None:
            raise ProcessNotFoundError()

        classifier = ElementClassifier(signals)
        builder = ProcessModelBuilder(
            process_id=process.get("id", ""),
            process_name=process.get("name", ""),
            signals=signals.as_dict(),
        )
        for child in process:
            builder.add(classifier.classify(child))

        model = builder.build()
        logger.debug(
            "Process %r: %d nodes, %d sequence flows",
            model.process_id, len(model.nodes), len(model.sequence_flows),
        )
        return model


def parse_bpmn(source: Source) -> ProcessModel:
    return BpmnParser().parse(source)
