import pytest

from articulos_core.ids import DEFAULT_ID_LENGTH, URL_SAFE_ALPHABET, generate_id, make_id_generator


def test_generate_id_default_length_and_alphabet():
    value = generate_id()
    assert len(value) == DEFAULT_ID_LENGTH == 6
    assert set(value) <= set(URL_SAFE_ALPHABET)


def test_make_id_generator_respects_length_and_alphabet():
    gen = make_id_generator(10, alphabet="ab")
    values = {gen() for _ in range(20)}
    assert all(len(v) == 10 for v in values)
    assert all(set(v) <= {"a", "b"} for v in values)


def test_ids_are_not_repeated_in_practice():
    gen = make_id_generator()
    values = [gen() for _ in range(500)]
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("length", [0, -3])
def test_invalid_length_raises(length):
    with pytest.raises(ValueError):
        make_id_generator(length)
    with pytest.raises(ValueError):
        generate_id(length)


def test_empty_alphabet_raises():
    with pytest.raises(ValueError):
        make_id_generator(6, alphabet="")
