import json
from pathlib import Path

import pytest

from tilecraft.data_manager import DataManager, Registry, load_namespace, strip_jsonc
from tilecraft.definitions import DefinitionError, HandleModelType
from tilecraft.ids import Id


def _write(path: Path, content) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")


@pytest.fixture
def resources(tmp_path):
    data = tmp_path / "res" / "data"
    _write(
        data / "core" / "tiles.json",
        '{\n  // the basics\n  "tiles": {"stone": {"texture": "stone"}, "dirt": {"model": "none"}},\n'
        '  /* tools */ "items": {"pick": {}}\n}',
    )
    _write(data / "extra" / "ore.json", {"tiles": {"ore": {"model": "models/ore"}}})
    return tmp_path / "res"


def test_strip_jsonc_keeps_strings():
    text = '{"url": "a//b", /* c */ "x": 1 // tail\n}'
    assert json.loads(strip_jsonc(text)) == {"url": "a//b", "x": 1}


def test_registry_rejects_unknown_section():
    with pytest.raises(DefinitionError):
        Registry.from_json({"blocks": {}})


def test_reload_loads_all_namespaces(resources):
    manager = DataManager(resources)
    manager.reload()
    assert set(manager.tile_ids()) == {Id("core", "stone"), Id("core", "dirt"), Id("extra", "ore")}
    assert manager.item_ids() == [Id("core", "pick")]
    assert manager.get_tile("extra::ore").model_type is HandleModelType.CUSTOM
    assert manager.get_tile("core::dirt").model_type is HandleModelType.NONE
    assert manager.get_item(Id("core", "pick")) is not None
    assert manager.get_tile("core::missing") is None


def test_mappings_follow_sorted_order(resources):
    manager = DataManager(resources)
    manager.reload()
    count = len(manager.tile_ids()) + len(manager.item_ids())
    ids = [manager.mapped_id(i) for i in range(count)]
    assert ids == sorted(ids)
    for mapped, ident in enumerate(ids):
        assert manager.id_mapping(ident) == mapped
    with pytest.raises(KeyError):
        manager.mapped_id(count)
    with pytest.raises(KeyError):
        manager.id_mapping("core::missing")


def test_bad_file_is_reported_and_skipped(tmp_path, capsys):
    root = tmp_path / "ns"
    _write(root / "a.json", "{not json")
    _write(root / "b.json", {"tiles": {"sand": {}}})
    registry = load_namespace("ns", root)
    assert list(registry.tiles) == ["sand"]
    assert "Error loading from" in capsys.readouterr().out


def test_later_file_overrides(tmp_path):
    root = tmp_path / "ns"
    _write(root / "a.json", {"tiles": {"sand": {"texture": "first"}}})
    _write(root / "b.json", {"tiles": {"sand": {"texture": "second"}}})
    _write(root / "notes.txt", "ignored")
    assert load_namespace("ns", root).tiles["sand"].texture == "second"


def test_missing_data_directory(tmp_path, capsys):
    manager = DataManager(tmp_path / "nowhere")
    calls = []
    manager.add_listener(lambda: calls.append(True))
    manager.reload()
    assert manager.tile_ids() == []
    assert calls == []
    assert "invalid" in capsys.readouterr().out


def test_listener_called_on_reload(resources):
    manager = DataManager(resources)
    calls = []
    manager.add_listener(lambda: calls.append(len(manager.tile_ids())))
    manager.reload()
    assert calls == [3]


def test_reload_clears_previous(resources, tmp_path):
    manager = DataManager(resources)
    manager.reload()
    manager.set_resources_folder(tmp_path / "empty")
    (tmp_path / "empty" / "data").mkdir(parents=True)
    manager.reload()
    assert manager.tile_ids() == []
    assert manager.item_ids() == []


def test_set_resources_folder_normalises(capsys):
    manager = DataManager()
    manager.set_resources_folder("a/./b/../c")
    assert manager.resources_folder == Path("a/c")
    assert "Resources path set to" in capsys.readouterr().out
    manager.set_resources_folder("a/c")
    assert capsys.readouterr().out == ""