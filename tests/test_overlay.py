from tetris_game import Game
from tetris_overlay import message_for


def test_messages_follow_state(queue_of):
    g = Game(4, 4, queue=queue_of("O", cols=4))
    assert message_for(g.snapshot()) == ("Tetris", "Press Start")
    g.start()
    assert message_for(g.snapshot()) is None
    g.pause()
    assert message_for(g.snapshot()) == ("Paused", "Press Resume to continue")
    g.resume()
    g.hard_drop()
    g.hard_drop()
    assert message_for(g.snapshot()) == ("Game Over", "Final Score: 4")


def test_final_score_uses_thousands_separator(queue_of):
    g = Game(4, 4, queue=queue_of("O", cols=4))
    g.start()
    g._session.score = 1234567
    g.hard_drop()
    g.hard_drop()
    assert message_for(g.snapshot())[1] == "Final Score: 1,234,571"
