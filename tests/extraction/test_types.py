"""Parameter type canonicalization tests."""

import pytest

from sigscan.errors import CanonicalizationError
from sigscan.extraction import SignatureExtractor


@pytest.mark.parametrize(
    "fragment, expected",
    [
        ("uint256 calldata x", "uint256"),
        ("address[] memory r", "address[]"),
        (" uint256[] calldata amounts", "uint256[]"),
        ("address to", "address"),
        ("bool", "bool"),
        ("bytes32[2] memory pair", "bytes32[2]"),
        ("uint256 [] values", "uint256[]"),
        ("IERC20 token", "IERC20"),
        ("Lib.Order memory order", "Lib.Order"),
        ("uint256 [ 3 ] v", "uint256[3]"),
        ("address payable to", "address"),
        ("address payable[] memory xs", "address[]"),
    ],
)
def test_canonicalize_param_keeps_only_the_type(extractor, fragment, expected):
    assert extractor.canonicalize_param(fragment) == expected


def test_whitespace_variations_do_not_change_the_token(extractor):
    variants = ["uint256 calldata x", "  uint256   calldata\tx  ", "\tuint256 calldata x\n"]
    assert {extractor.canonicalize_param(v) for v in variants} == {"uint256"}
    arrays = ["uint256[] values", "uint256 [] values", "uint256[ ] values", "uint256 [ ] values"]
    assert {extractor.canonicalize_param(v) for v in arrays} == {"uint256[]"}


def test_aliases_are_normalized_by_default(extractor):
    assert extractor.canonicalize_param("uint x") == "uint256"
    assert extractor.canonicalize_param("int[] memory xs") == "int256[]"
    assert extractor.canonicalize_param("fixed f") == "fixed128x18"
    assert extractor.canonicalize_param("ufixed[3] f") == "ufixed128x18[3]"


def test_alias_normalization_can_be_disabled():
    extractor = SignatureExtractor(normalize_aliases=False)
    assert extractor.canonicalize_param("uint x") == "uint"
    assert extractor.canonicalize_param("uint[] xs") == "uint[]"


@pytest.mark.parametrize("fragment", ["", "   ", "memory x", "calldata", "123abc x", "=> y"])
def test_malformed_fragment_yields_empty_token_in_lenient_mode(extractor, fragment):
    assert extractor.canonicalize_param(fragment) == ""


def test_malformed_fragment_raises_in_strict_mode(strict_extractor):
    with pytest.raises(CanonicalizationError) as excinfo:
        strict_extractor.canonicalize_param("memory x")
    assert excinfo.value.fragment == "memory x"


def test_split_params_drops_empty_entries(extractor):
    assert extractor.split_params("") == []
    assert extractor.split_params("address a, uint256 b") == ["address a", " uint256 b"]
    assert extractor.split_params("address a,") == ["address a"]
