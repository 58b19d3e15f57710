"""Extraction driver tests."""

from sigscan.extraction import SignatureExtractor
from tests._fixtures.samples import TOKEN_SOURCE, selector_of


def test_transfer_function_signature(extractor):
    result = extractor.extract_text("function transfer(address to, uint256 amount) public returns (bool)")
    (record,) = result.functions
    assert record.signature.canonical_text == "transfer(address,uint256)"
    assert record.signature.digest_hex == selector_of("transfer(address,uint256)") == "0xa9059cbb"
    assert record.line_number == 1


def test_custom_error_signature(extractor):
    result = extractor.extract_text("error InsufficientBalance(uint256 available, uint256 required);")
    (record,) = result.errors
    assert record.signature.canonical_text == "InsufficientBalance(uint256,uint256)"
    assert record.signature.digest_hex == selector_of("InsufficientBalance(uint256,uint256)")


def test_require_hashes_the_message_not_the_condition(extractor):
    result = extractor.extract_text('require(balance >= amount, "Insufficient balance");')
    (record,) = result.requires
    assert record.signature.canonical_text == "Insufficient balance"
    assert record.signature.digest_hex == selector_of("Insufficient balance")
    assert record.display_text == 'require(balance >= amount, "Insufficient balance")'


def test_public_variable_getter_signature(extractor):
    result = extractor.extract_text("uint256 public totalSupply = 0;")
    (record,) = result.getters
    assert record.signature.canonical_text == "totalSupply(uint256)"
    assert record.signature.digest_hex == selector_of("totalSupply(uint256)")
    assert record.to_output() == {
        "canonical_text": "totalSupply(uint256)",
        "digest_hex": selector_of("totalSupply(uint256)"),
    }


def test_records_are_grouped_by_kind_with_source_line_numbers(extractor):
    result = extractor.extract_text(TOKEN_SOURCE, "Token.sol")
    assert result.relative_path == "Token.sol"
    assert [(r.line_number, r.signature.canonical_text) for r in result.getters] == [(5, "totalSupply(uint256)")]
    assert [(r.line_number, r.signature.canonical_text) for r in result.errors] == [
        (6, "InsufficientBalance(uint256,uint256)")
    ]
    assert [(r.line_number, r.signature.canonical_text) for r in result.functions] == [
        (8, "transfer(address,uint256)")
    ]
    assert [(r.line_number, r.signature.canonical_text) for r in result.requires] == [(9, "Insufficient balance")]
    assert result.warnings == ()


def test_records_keep_line_order_within_a_kind(extractor):
    source = "function b() external {}\n\nfunction a(uint x) external {}\n"
    result = extractor.extract_text(source)
    assert [(r.line_number, r.signature.canonical_text) for r in result.functions] == [
        (1, "b()"),
        (3, "a(uint256)"),
    ]


def test_crlf_line_endings_keep_line_numbers(extractor):
    result = extractor.extract_text("pragma solidity ^0.8.0;\r\nfunction f(uint256 x) external;\r\n")
    (record,) = result.functions
    assert record.line_number == 2
    assert record.signature.canonical_text == "f(uint256)"


def test_file_without_declarations_gives_empty_sequences(extractor):
    result = extractor.extract_text("// nothing to see\npragma solidity ^0.8.0;\n", "Empty.sol")
    assert result.record_count == 0
    assert result.to_output() == {
        "path": "Empty.sol",
        "functions": [],
        "errors": [],
        "requires": [],
        "getters": [],
        "warnings": [],
    }


def test_extraction_is_deterministic(extractor):
    first = extractor.extract_text(TOKEN_SOURCE, "Token.sol")
    second = SignatureExtractor().extract_text(TOKEN_SOURCE, "Token.sol")
    assert first == second
    assert first.to_output() == second.to_output()


def test_lenient_mode_keeps_degraded_signature_and_warns(extractor):
    result = extractor.extract_text("function weird(memory x, uint256 y) public {}")
    (record,) = result.functions
    assert record.signature.canonical_text == "weird(,uint256)"
    assert len(result.warnings) == 1
    assert "degraded signature weird(,uint256)" in result.warnings[0]


def test_strict_mode_skips_malformed_declaration(strict_extractor):
    source = "function weird(memory x) public {}\nfunction fine(uint256 y) public {}\n"
    result = strict_extractor.extract_text(source)
    assert [r.signature.canonical_text for r in result.functions] == ["fine(uint256)"]
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("line 1: skipped function declaration")


def test_strict_mode_flags_ambiguous_lines(strict_extractor, extractor):
    line = 'function guard() public { require(ready, "not ready"); }'
    strict = strict_extractor.extract_text(line)
    assert [r.signature.canonical_text for r in strict.functions] == ["guard()"]
    assert strict.requires == ()
    assert strict.warnings == ("line 1: ambiguous declaration (function, require), using function",)
    assert extractor.extract_text(line).warnings == ()


def test_spaced_array_brackets_keep_the_array_in_strict_mode(strict_extractor):
    result = strict_extractor.extract_text("function f(uint256 [ ] v) external {}")
    (record,) = result.functions
    assert record.signature.canonical_text == "f(uint256[])"
    assert record.signature.digest_hex == selector_of("f(uint256[])")
    assert result.warnings == ()


def test_address_payable_state_variable_getter(extractor):
    result = extractor.extract_text("address payable public owner = payable(msg.sender);")
    (record,) = result.getters
    assert record.signature.canonical_text == "owner(address)"
    assert record.signature.digest_hex == selector_of("owner(address)")
