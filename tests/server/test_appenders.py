import json

import pytest

from bootcfg.errors import RetrievalError, SerializationError
from bootcfg.ignition.codec import read_file
from bootcfg.ignition.constants import (
    KUBECONFIG_PATH,
    NODE_ANNOTATIONS_PATH,
    PIVOT_IMAGE_PATH,
    PIVOT_REBOOT_UNIT_NAME,
)
from bootcfg.ignition.models import new_document
from bootcfg.server import appenders as mod
from bootcfg.server.appenders import (
    append_initial_pivot,
    append_kubeconfig,
    append_node_annotations,
    get_appenders,
    get_node_annotation,
)


def test_node_annotations_content():
    doc = new_document()
    append_node_annotations(doc, "rendered-worker-1")
    assert doc.paths() == [NODE_ANNOTATIONS_PATH]
    anno = json.loads(read_file(doc, NODE_ANNOTATIONS_PATH))
    assert anno == {
        "machineconfiguration.openshift.io/currentConfig": "rendered-worker-1",
        "machineconfiguration.openshift.io/desiredConfig": "rendered-worker-1",
        "machineconfiguration.openshift.io/state": "Done",
    }


def test_node_annotation_encoding_is_canonical():
    assert get_node_annotation("c") == get_node_annotation("c")
    assert get_node_annotation("c").startswith('{"machineconfiguration.openshift.io/currentConfig":"c"')


def test_node_annotation_marshal_failure_raises_serialization_error(monkeypatch):
    def boom(*a, **k):
        raise TypeError("not serializable")
    monkeypatch.setattr(mod.json, "dumps", boom)
    doc = new_document()
    with pytest.raises(SerializationError, match="could not marshal node annotations"):
        append_node_annotations(doc, "c")
    assert doc.files == []


@pytest.mark.parametrize("target", ["", None])
def test_initial_pivot_is_noop_without_target(target):
    doc = new_document()
    before = doc.model_dump()
    append_initial_pivot(doc, target)
    assert doc.model_dump() == before


def test_initial_pivot_writes_target_and_unit():
    doc = new_document()
    append_initial_pivot(doc, "quay.io/img:v2")
    assert read_file(doc, PIVOT_IMAGE_PATH) == b"quay.io/img:v2\n"
    assert len(doc.units) == 1
    unit = doc.units[0]
    assert unit.name == PIVOT_REBOOT_UNIT_NAME
    assert unit.enabled is True
    assert "ConditionFirstBoot=true" in unit.contents
    assert "Before=pivot.service" in unit.contents
    assert "mkdir /run/pivot && touch /run/pivot/reboot-needed" in unit.contents
    assert "WantedBy=multi-user.target" in unit.contents


def test_kubeconfig_ignores_root_ca():
    doc = new_document()
    append_kubeconfig(doc, lambda: (b"KUBECONFIGDATA", b"ROOTCA"))
    assert doc.paths() == [KUBECONFIG_PATH]
    assert read_file(doc, KUBECONFIG_PATH) == b"KUBECONFIGDATA"


def test_kubeconfig_propagates_retrieval_error_unchanged():
    err = RetrievalError("secret not found")

    def source():
        raise err

    doc = new_document()
    with pytest.raises(RetrievalError) as exc_info:
        append_kubeconfig(doc, source)
    assert exc_info.value is err
    assert doc.files == []


def test_get_appenders_order():
    calls = []

    def source():
        calls.append("kubeconfig")
        return b"kc", None

    doc = new_document()
    appenders = get_appenders("cfg-a", source, "quay.io/img:v2")
    assert len(appenders) == 3
    for append in appenders:
        append(doc)
    assert doc.paths() == [NODE_ANNOTATIONS_PATH, PIVOT_IMAGE_PATH, KUBECONFIG_PATH]
    assert calls == ["kubeconfig"]
