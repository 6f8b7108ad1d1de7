import pytest

from soraka.consts import (
    CHAMPION_OPTIONS,
    IN_PROGRESS,
    ROBOT_PUUID,
    ChampionOption,
    GameFlowPhase,
    champion_by_id,
    search_champions,
)


def test_phase_from_client_value():
    assert GameFlowPhase("InProgress") is GameFlowPhase.IN_GAME
    assert GameFlowPhase.IN_GAME.value == IN_PROGRESS


def test_unknown_phase_raises():
    with pytest.raises(ValueError):
        GameFlowPhase("Nowhere")


def test_robot_puuid_is_all_zero():
    assert set(ROBOT_PUUID.replace("-", "")) == {"0"}


def test_champion_by_id():
    option = champion_by_id(16)
    assert option == ChampionOption("众星之子", 16, "索拉卡", "奶妈")


def test_champion_by_id_unknown():
    with pytest.raises(KeyError):
        champion_by_id(46)


def test_champion_ids_unique_and_ascending():
    values = [option.value for option in CHAMPION_OPTIONS]
    assert values == sorted(set(values))
    assert all(champion_by_id(v).value == v for v in values)


def test_first_option_is_all():
    assert champion_by_id(0).label == "全部"
    assert CHAMPION_OPTIONS[0] == champion_by_id(0)


def test_search_by_nickname_ignores_case():
    found = search_champions("Uzi")
    assert [option.value for option in found] == [67]


def test_search_by_real_name():
    values = [option.value for option in search_champions("卡特琳娜")]
    assert values == [39, 55]


def test_search_by_label():
    found = search_champions("盲僧")
    assert [option.real_name for option in found] == ["李青"]


def test_search_blank_returns_all():
    assert search_champions("  ") == list(CHAMPION_OPTIONS)


def test_search_no_match():
    assert search_champions("zzzz-no-such-champion") == []


def test_search_results_all_contain_keyword():
    keyword = "虚空"
    found = search_champions(keyword)
    assert len(found) > 0
    for option in found:
        assert any(
            keyword in name
            for name in (option.label, option.real_name, option.nickname)
        )