import pytest

from bootcfg.server.units import UnitTemplateError, pivot_reboot_unit, render_unit


def test_pivot_unit_body():
    unit = pivot_reboot_unit()
    assert unit.contents.splitlines() == [
        "[Unit]",
        "Before=pivot.service",
        "ConditionFirstBoot=true",
        "[Service]",
        "ExecStart=/bin/sh -c 'mkdir /run/pivot && touch /run/pivot/reboot-needed'",
        "[Install]",
        "WantedBy=multi-user.target",
    ]
    assert unit.contents.endswith("\n")


def test_render_unit_missing_template():
    with pytest.raises(UnitTemplateError):
        render_unit("nope.service.j2", {})
