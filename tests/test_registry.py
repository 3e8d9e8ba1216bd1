from chromascheme.colors.rgb import ColorUnitRGB
from chromascheme.palette import Palette
from chromascheme.registry import SchemeRegistry, SchemeMatch, load_scheme, find_schemes
from chromascheme.errors import SchemeOverwriteWarning
import threading
import warnings
import pytest

@pytest.fixture
def schemes():
    registry = SchemeRegistry()
    load_scheme(registry, "fire", [(0, 0, 0), (1, 0, 0), (1, 1, 0)], "custom", "black to red to yellow")
    load_scheme(registry, "ocean", [(0, 0, 0.2), (0, 0.4, 1)], "sequential", "dark navy fading into a bright sea blue")
    load_scheme(registry, "custom_grays", [(0, 0, 0), (1, 1, 1)], "custom", "plain grays")
    return registry

def test_load_and_lookup(schemes):
    assert len(schemes) == 3
    assert "fire" in schemes
    fire = schemes["fire"]
    assert isinstance(fire, Palette)
    assert fire.category == "custom"
    assert fire[1] == ColorUnitRGB((1.0, 0.0, 0.0))

def test_missing_name(schemes):
    with pytest.raises(KeyError):
        schemes["nope"]

def test_register_reports_overwrite():
    registry = SchemeRegistry()
    bw = Palette([(0, 0, 0), (1, 1, 1)])
    assert registry.register("bw", bw) is False
    assert registry.register("bw", bw.reversed()) is True
    assert registry["bw"] == bw.reversed()

def test_overwrite_warns(schemes):
    with pytest.warns(SchemeOverwriteWarning, match="fire overwritten"):
        load_scheme(schemes, "fire", [(1, 1, 1), (0, 0, 0)])
    assert schemes["fire"][0] == ColorUnitRGB((1.0, 1.0, 1.0))
    assert len(schemes) == 3

def test_first_load_is_silent():
    registry = SchemeRegistry()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        load_scheme(registry, "bw", [(0, 0, 0), (1, 1, 1)])

def test_only_palettes_are_stored():
    registry = SchemeRegistry()
    with pytest.raises(TypeError):
        registry["bw"] = [(0, 0, 0), (1, 1, 1)]

def test_mapping_protocol(schemes):
    assert sorted(schemes) == ["custom_grays", "fire", "ocean"]
    del schemes["ocean"]
    assert "ocean" not in schemes
    copy = SchemeRegistry(dict(schemes))
    assert list(copy.keys()) == list(schemes.keys())
    assert repr(copy) == "SchemeRegistry(2 schemes)"

def test_find_by_name_is_case_insensitive(schemes):
    assert find_schemes(schemes, "FIRE") == [SchemeMatch("fire", "name", "fire")]

def test_find_by_category(schemes):
    assert find_schemes(schemes, "sequ") == [SchemeMatch("ocean", "category", "sequential")]

def test_name_match_hides_category_match(schemes):
    found = find_schemes(schemes, "custom")
    assert SchemeMatch("fire", "category", "custom") in found
    assert SchemeMatch("custom_grays", "name", "custom_grays") in found
    assert not any(m.name == "custom_grays" and m.field == "category" for m in found)

def test_notes_are_previewed(schemes):
    found = find_schemes(schemes, "sea blue")
    assert len(found) == 1
    assert found[0].field == "notes"
    assert found[0].text == "dark navy fading into a bright"
    assert len(found[0].text) == 30

def test_name_and_notes_both_reported(schemes):
    found = find_schemes(schemes, "gray")
    assert [m.field for m in found] == ["name", "notes"]

def test_regex_patterns(schemes):
    names = {m.name for m in find_schemes(schemes, r"^(fire|ocean)$")}
    assert names == {"fire", "ocean"}
    assert find_schemes(schemes, "no such thing") == []

def test_concurrent_registration():
    registry = SchemeRegistry()
    bw = Palette([(0, 0, 0), (1, 1, 1)])

    def worker(offset):
        for i in range(50):
            registry.register(f"scheme{offset + i}", bw)

    threads = [threading.Thread(target=worker, args=(k * 50,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(registry) == 200
