import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


BPMN_NS = "http://www.omg.org/spec/BPMN/20100524/MODEL"


def make_bpmn(body: str, signals: str = "", namespaced: bool = True) -> bytes:
    """Wrap process children in a definitions document.

    ``namespaced`` uses the ``bpmn:`` prefix, otherwise bare tags without any
    namespace are produced.
    """
    if namespaced:
        doc = f"""<?xml version="1.0" encoding="UTF-8"?>
<bpmn:definitions xmlns:bpmn="{BPMN_NS}" id="Definitions_1" targetNamespace="http://bpmn.io/schema/bpmn">
  {signals}
  <bpmn:process id="Process_1" name="Test process" isExecutable="true">
    {body}
  </bpmn:process>
</bpmn:definitions>
"""
    else:
        doc = f"""<?xml version="1.0" encoding="UTF-8"?>
<definitions id="Definitions_1">
  {signals}
  <process id="Process_1" name="Test process">
    {body}
  </process>
</definitions>
"""
    return doc.encode("utf-8")


LINEAR_BODY = """
    <bpmn:startEvent id="A" name="Start" />
    <bpmn:userTask id="B" name="Review" />
    <bpmn:endEvent id="C" name="Done" />
    <bpmn:sequenceFlow id="F1" sourceRef="A" targetRef="B" />
    <bpmn:sequenceFlow id="F2" sourceRef="B" targetRef="C" />
"""


@pytest.fixture
def linear_bpmn() -> bytes:
    return make_bpmn(LINEAR_BODY)


@pytest.fixture
def signal_bpmn() -> bytes:
    return make_bpmn(
        """
    <bpmn:startEvent id="Start_1" name="Order received" />
    <bpmn:serviceTask id="Task_Charge" name="Charge card" />
    <bpmn:intermediateCatchEvent id="Catch_1" name="Wait for alert">
      <bpmn:signalEventDefinition id="SED_1" signalRef="Sig1" />
    </bpmn:intermediateCatchEvent>
    <bpmn:intermediateCatchEvent id="Catch_2" name="Wait for unknown">
      <bpmn:signalEventDefinition id="SED_2" signalRef="SigX" />
    </bpmn:intermediateCatchEvent>
    <bpmn:intermediateCatchEvent id="Timer_1" name="Wait a day">
      <bpmn:timerEventDefinition id="TED_1" />
    </bpmn:intermediateCatchEvent>
    <bpmn:endEvent id="End_1" name="Order shipped" />
    <bpmn:sequenceFlow id="Flow_1" sourceRef="Start_1" targetRef="Task_Charge" />
    <bpmn:sequenceFlow id="Flow_2" sourceRef="Task_Charge" targetRef="Catch_1" />
    <bpmn:sequenceFlow id="Flow_3" sourceRef="Catch_1" targetRef="Catch_2" />
    <bpmn:sequenceFlow id="Flow_4" sourceRef="Catch_2" targetRef="Timer_1" />
    <bpmn:sequenceFlow id="Flow_5" sourceRef="Timer_1" targetRef="End_1" />
""",
        signals='<bpmn:signal id="Sig1" name="Alert" />',
    )


@pytest.fixture
def bpmn_file(tmp_path, linear_bpmn) -> Path:
    path = tmp_path / "process.bpmn"
    path.write_bytes(linear_bpmn)
    return path
