from types import SimpleNamespace

import pytest

from soraka.automation import AutomationUseCase


class FakeGameflow:
    def __init__(self, state, response):
        self.status = SimpleNamespace(state=state, player_response=response)
        self.accepted = 0

    def get_ready_check_status(self):
        return self.status

    def accept_ready_check(self):
        self.accepted += 1


class FakeChampSelect:
    def __init__(self, session, fail_ids=()):
        self.session = session
        self.fail_ids = set(fail_ids)
        self.calls = []

    def get_session(self):
        if isinstance(self.session, Exception):
            raise self.session
        return self.session

    def select_champion(self, action_id, champion_id, completed):
        self.calls.append(("pick", action_id, champion_id, completed))

    def ban_champion(self, action_id, champion_id, completed):
        self.calls.append(("ban", action_id, champion_id, completed))

    def accept_trade(self, trade_id):
        if trade_id in self.fail_ids:
            raise RuntimeError("refused")
        self.calls.append(("trade", trade_id))

    def accept_swap(self, swap_id):
        if swap_id in self.fail_ids:
            raise RuntimeError("refused")
        self.calls.append(("swap", swap_id))


class FakeRunes:
    def __init__(self, page=None, get_error=None, delete_error=None):
        self.page = page
        self.get_error = get_error
        self.delete_error = delete_error
        self.calls = []

    def get_current_page(self):
        if self.get_error:
            raise self.get_error
        return self.page

    def delete_page(self, page_id):
        self.calls.append(("delete", page_id))
        if self.delete_error:
            raise self.delete_error

    def create_page(self, name, primary, sub, perks):
        self.calls.append(("create", name, primary, sub, perks))


def action(id, actor, type, completed=False, in_progress=True):
    return SimpleNamespace(
        id=id, actor_cell_id=actor, type=type, completed=completed, is_in_progress=in_progress
    )


def session(actions=(), trades=(), swaps=(), cell=2):
    return SimpleNamespace(
        actions=[list(g) for g in actions],
        local_player_cell_id=cell,
        trades=list(trades),
        pick_order_swaps=list(swaps),
    )


def make(gameflow=None, champ=None, runes=None):
    return AutomationUseCase(gameflow or FakeGameflow("", ""), champ or FakeChampSelect(session()), runes or FakeRunes())


def test_accepts_pending_ready_check():
    gf = FakeGameflow("InProgress", "None")
    assert make(gameflow=gf).auto_accept_ready_check() is True
    assert gf.accepted == 1


@pytest.mark.parametrize("state,response", [("InProgress", "Accepted"), ("Invalid", "None")])
def test_does_not_accept_otherwise(state, response):
    gf = FakeGameflow(state, response)
    assert make(gameflow=gf).auto_accept_ready_check() is False
    assert gf.accepted == 0


def test_selects_own_in_progress_pick():
    s = session(actions=[[action(1, 1, "pick"), action(2, 2, "ban")], [action(3, 2, "pick")]])
    cs = FakeChampSelect(s)
    assert make(champ=cs).auto_select_champion(16) is True
    assert cs.calls == [("pick", 3, 16, True)]


def test_skips_completed_or_waiting_picks():
    s = session(actions=[[action(1, 2, "pick", completed=True), action(2, 2, "pick", in_progress=False)]])
    cs = FakeChampSelect(s)
    assert make(champ=cs).auto_select_champion(16) is False
    assert cs.calls == []


def test_bans_own_action():
    s = session(actions=[[action(5, 2, "pick"), action(6, 2, "ban")]])
    cs = FakeChampSelect(s)
    assert make(champ=cs).auto_ban_champion(99) is True
    assert cs.calls == [("ban", 6, 99, True)]


def test_session_error_propagates():
    cs = FakeChampSelect(RuntimeError("no session"))
    with pytest.raises(RuntimeError, match="no session"):
        make(champ=cs).auto_ban_champion(1)


def test_accepts_received_trades_and_skips_failures():
    trades = [
        SimpleNamespace(id=1, state="RECEIVED"),
        SimpleNamespace(id=2, state="SENT"),
        SimpleNamespace(id=3, state="RECEIVED"),
        SimpleNamespace(id=4, state="RECEIVED"),
    ]
    cs = FakeChampSelect(session(trades=trades), fail_ids={3})
    assert make(champ=cs).auto_accept_trades() == [1, 4]
    assert cs.calls == [("trade", 1), ("trade", 4)]


def test_accepts_received_swaps():
    swaps = [SimpleNamespace(id=7, state="RECEIVED"), SimpleNamespace(id=8, state="DECLINED")]
    cs = FakeChampSelect(session(swaps=swaps))
    assert make(champ=cs).auto_accept_swaps() == [7]
    assert cs.calls == [("swap", 7)]


def test_rune_page_replaces_deletable_page():
    runes = FakeRunes(page=SimpleNamespace(id=10, is_deletable=True))
    make(runes=runes).apply_rune_page("p", 8000, 8100, (1, 2))
    assert runes.calls == [("delete", 10), ("create", "p", 8000, 8100, [1, 2])]


def test_rune_page_keeps_undeletable_page():
    runes = FakeRunes(page=SimpleNamespace(id=10, is_deletable=False))
    make(runes=runes).apply_rune_page("p", 8000, 8100, [3])
    assert runes.calls == [("create", "p", 8000, 8100, [3])]


def test_rune_page_ignores_read_and_delete_errors():
    runes = FakeRunes(get_error=RuntimeError("x"))
    make(runes=runes).apply_rune_page("a", 1, 2, [])
    assert runes.calls == [("create", "a", 1, 2, [])]
    runes = FakeRunes(page=SimpleNamespace(id=4, is_deletable=True), delete_error=RuntimeError("y"))
    make(runes=runes).apply_rune_page("b", 1, 2, [])
    assert runes.calls == [("delete", 4), ("create", "b", 1, 2, [])]