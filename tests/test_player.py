from genkingdom.player import Player


def test_new_player_has_no_gold():
    assert Player().gold == 0


def test_add_gold_accumulates():
    player = Player()
    player.add_gold(10)
    player.add_gold(5)
    assert player.gold == 15


def test_spend_gold_with_enough_funds():
    player = Player()
    player.add_gold(20)
    assert player.spend_gold(20) is True
    assert player.gold == 0


def test_spend_gold_without_enough_funds_keeps_balance():
    player = Player()
    player.add_gold(3)
    assert player.spend_gold(4) is False
    assert player.gold == 3


def test_spend_then_add_round_trip():
    player = Player()
    player.add_gold(50)
    assert player.spend_gold(30) is True
    player.add_gold(30)
    assert player.gold == 50