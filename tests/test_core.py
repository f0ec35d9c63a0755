import logging

import pytest

from lettertrie.core import Unscrambler, ConfigError, load_words, UPPER


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('foo\n  food \n\nfoods\nbar\n', encoding='utf-8')
    return path


def test_load_words(words_file, caplog):
    with caplog.at_level(logging.INFO, logger='lettertrie.core'):
        assert list(load_words(words_file)) == ['foo', 'food', 'foods', 'bar']
    assert "Loaded 4 words" in caplog.text


def test_load_words_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(load_words(tmp_path / 'missing.txt'))


def test_unscrambler_from_words_file(words_file):
    path = words_file

    class Config(Unscrambler):
        words_file = path

    solver = Config()
    assert solver.find('food', 1) == ['foo', 'food', 'foods']
    assert 'bar' in solver


def test_unscrambler_needs_words():
    with pytest.raises(ConfigError):
        Unscrambler()


def test_case_policy():
    class Shouty(Unscrambler):
        case = UPPER

    solver = Shouty(['foo', 'Bar'])
    assert solver.find('oOf') == ['FOO']
    assert 'bar' in solver


def test_unknown_case_policy():
    class Odd(Unscrambler):
        case = 'title'

    with pytest.raises(ConfigError):
        Odd(['foo'])


def test_wildcards_used():
    assert Unscrambler.wildcards_used('foods', 'food') == 1
    assert Unscrambler.wildcards_used('foo', 'food') == 0
    assert Unscrambler.wildcards_used('bar', '') == 3


def test_show():
    solver = Unscrambler(['foo', 'food', 'foods', 'bar'])
    df = solver.show('food', 1)
    assert list(df.columns) == ['word', 'length', 'wildcards_used']
    assert df['word'].tolist() == ['foo', 'food', 'foods']
    assert df['length'].tolist() == [3, 4, 5]
    assert df['wildcards_used'].tolist() == [0, 0, 1]


def test_show_nothing_found():
    df = Unscrambler(['foo']).show('xyz')
    assert df.empty
    assert list(df.columns) == ['word', 'length', 'wildcards_used']
