import pytest

from tilecollapse.errors import ConfigurationError
from tilecollapse.tsv import read_tsv, write_tsv

MAP = [[3, 3, 5, 3], [3, 1, 2, 3], [3, 5, 3, 3]]

def test_header_row_is_skipped(tmp_path):
    plain, headed = tmp_path / "plain.tsv", tmp_path / "headed.tsv"
    write_tsv(MAP, str(plain))
    write_tsv(MAP, str(headed), include_header=True)
    assert headed.read_text().splitlines()[0] == "0\t1\t2\t3"
    assert read_tsv(str(plain)) == MAP
    assert read_tsv(str(headed)) == MAP

def test_ragged_or_garbage_rejected(tmp_path):
    ragged = tmp_path / "ragged.tsv"
    ragged.write_text("3\t3\n3\n")
    with pytest.raises(ConfigurationError):
        read_tsv(str(ragged))
    words = tmp_path / "words.tsv"
    words.write_text("3\tgrass\n")
    with pytest.raises(ConfigurationError):
        read_tsv(str(words))
    header_only = tmp_path / "header_only.tsv"
    header_only.write_text("0\t1\t2\n")
    with pytest.raises(ConfigurationError):
        read_tsv(str(header_only))
