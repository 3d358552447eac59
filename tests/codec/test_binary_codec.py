"""
Binary codec tests.

Covers canonical encoding of transactions, decode round trips, the signing
encodings and the failure modes of decode on damaged buffers.
"""

import hashlib
import json

import pytest

import xrpl_codec
from xrpl_codec.addresses import AddressCodec
from xrpl_codec.codec import BinaryCodec
from xrpl_codec.runtime.errors import (
    InvalidArgumentError,
    InvalidEncodingError,
    MalformedInputError,
    TruncatedInputError,
    UnknownFieldError,
)

GENESIS_ACCOUNT_ID = "B5F762798A53D543A014CAF8B297CFF8F2F937E8"


def _payment_hex(tx, include_signature=True, signing_pub_key=None):
    """Hand-assemble the canonical encoding of the payment_tx fixture."""
    pub_key = tx["SigningPubKey"] if signing_pub_key is None else signing_pub_key
    out = (
        "120000"
        + "2280000000"
        + "2400000002"
        + "6140000000000F4240"
        + "68400000000000000C"
        + "73" + "%02X" % (len(pub_key) // 2) + pub_key
    )
    if include_signature:
        out += "74" + "%02X" % (len(tx["TxnSignature"]) // 2) + tx["TxnSignature"]
    out += "8114" + GENESIS_ACCOUNT_ID
    out += "8314" + "11" * 20
    return out


@pytest.mark.unit
class TestEncode:
    """Test canonical encoding."""

    def test_minimal_payment(self, codec, genesis_address):
        """Test a minimal payment against its known encoding."""
        tx = {
            "TransactionType": "Payment",
            "Flags": 0,
            "Sequence": 1,
            "Fee": "10",
            "Account": genesis_address,
        }
        expected = (
            "120000"
            + "2200000000"
            + "2400000001"
            + "68400000000000000A"
            + "8114" + GENESIS_ACCOUNT_ID
        )
        assert codec.encode(tx) == expected

    def test_canonical_field_order(self, codec, payment_tx):
        """Test that fields are written in (type code, field code) order."""
        assert codec.encode(payment_tx) == _payment_hex(payment_tx)

    def test_key_order_does_not_matter(self, codec, payment_tx):
        """Test that any permutation of JSON keys gives the same bytes."""
        reversed_tx = dict(reversed(list(payment_tx.items())))
        assert codec.encode(reversed_tx) == codec.encode(payment_tx)

    def test_encode_json_string(self, codec, payment_tx):
        """Test that a JSON string encodes like the equivalent dict."""
        assert codec.encode(json.dumps(payment_tx)) == codec.encode(payment_tx)

    def test_invalid_json_string(self, codec):
        """Test that unparseable JSON fails as malformed input."""
        with pytest.raises(MalformedInputError):
            codec.encode("{not json")

    def test_non_object_rejected(self, codec):
        """Test that the top-level value must be an object."""
        with pytest.raises(MalformedInputError):
            codec.encode([1, 2, 3])

    def test_unknown_field_rejected(self, codec):
        """Test that a key missing from the registry fails."""
        with pytest.raises(MalformedInputError) as exc_info:
            codec.encode({"Sequence": 1, "NotAField": 5})
        assert exc_info.value.details["field"] == "NotAField"

    def test_wrong_value_type_names_field(self, codec):
        """Test that a type mismatch reports the offending field."""
        with pytest.raises(MalformedInputError) as exc_info:
            codec.encode({"Sequence": "one"})
        assert exc_info.value.details["field"] == "Sequence"

    def test_unknown_transaction_type(self, codec):
        """Test that an unknown enumerated name fails."""
        with pytest.raises(MalformedInputError):
            codec.encode({"TransactionType": "Teleport"})

    def test_non_serialized_field_skipped(self, codec):
        """Test that fields flagged not serialized are left out."""
        assert codec.encode({"hash": "00" * 32, "Sequence": 1}) == "2400000001"

    def test_module_level_encode(self, payment_tx):
        """Test the shared-codec convenience function."""
        assert xrpl_codec.encode(payment_tx) == _payment_hex(payment_tx)

    def test_blob_length_prefix_boundary(self, codec):
        """Test two-byte length prefixes on a large blob."""
        encoded = codec.encode({"MemoData": "AB" * 193})
        assert encoded.startswith("7D" + "C100")
        assert len(encoded) == 2 + 4 + 193 * 2


@pytest.mark.unit
class TestDecode:
    """Test decoding and round trips."""

    def test_round_trip(self, codec, payment_tx):
        """Test that decode inverts encode."""
        assert codec.decode(codec.encode(payment_tx)) == payment_tx

    def test_lowercase_hex(self, codec, payment_tx):
        """Test that decode accepts lower case hex."""
        assert codec.decode(codec.encode(payment_tx).lower()) == payment_tx

    def test_issued_amount_round_trip(self, codec, genesis_address, make_address):
        """Test a payment carrying an issued-currency amount and SendMax."""
        tx = {
            "TransactionType": "Payment",
            "Account": make_address(0x22),
            "Destination": make_address(0x33),
            "Amount": {"currency": "USD", "issuer": genesis_address, "value": "1.5"},
            "SendMax": {"currency": "USD", "issuer": genesis_address, "value": "-0.0001"},
            "Fee": "10",
            "Sequence": 7,
        }
        assert codec.decode(codec.encode(tx)) == tx

    def test_ledger_object_round_trip(self, codec, genesis_address):
        """Test an AccountRoot ledger entry with a UInt64 and a Hash256."""
        entry = {
            "LedgerEntryType": "AccountRoot",
            "Account": genesis_address,
            "Balance": "99999999999999980",
            "Flags": 0,
            "OwnerCount": 0,
            "PreviousTxnID": "E" * 64,
            "PreviousTxnLgrSeq": 3,
            "Sequence": 5,
            "IndexNext": "00000000000003E8",
        }
        assert codec.decode(codec.encode(entry)) == entry

    def test_nested_arrays_round_trip(self, codec, payment_tx):
        """Test Memos, Paths and a Vector256 in one object."""
        tx = dict(payment_tx)
        tx["Memos"] = [
            {"Memo": {"MemoType": "687474703A2F2F", "MemoData": "72656E74"}},
            {"Memo": {"MemoData": "00"}},
        ]
        tx["Paths"] = [
            [{"account": AddressCodec.encode_account_id(bytes([0x44]) * 20)}],
            [{"currency": "USD", "issuer": payment_tx["Account"]}],
        ]
        tx["Amendments"] = ["AA" * 32, "BB" * 32]
        assert codec.decode(codec.encode(tx)) == tx

    def test_memos_encoding(self, codec):
        """Test the exact bytes of an array of one object."""
        tx = {"Memos": [{"Memo": {"MemoData": "72656E74"}}]}
        assert codec.encode(tx) == "F9" + "EA" + "7D0472656E74" + "E1" + "F1"

    def test_negative_native_amount(self, codec):
        """Test that a native amount with the sign bit clear decodes as negative."""
        assert codec.decode("680000000000000064") == {"Fee": "-100"}

    def test_truncated_value(self, codec):
        """Test that a buffer ending mid-value fails."""
        with pytest.raises(TruncatedInputError):
            codec.decode("120000" + "22000000")

    def test_truncated_blob(self, codec):
        """Test that a length prefix longer than the buffer fails."""
        with pytest.raises(TruncatedInputError):
            codec.decode("7D05AABB")

    def test_unterminated_nested_object(self, codec):
        """Test that a nested object without its end marker fails."""
        with pytest.raises(TruncatedInputError):
            codec.decode("F9EA7D0100")

    def test_unterminated_array(self, codec):
        """Test that an array without its end marker fails."""
        with pytest.raises(TruncatedInputError):
            codec.decode("F9EA7D0100E1")

    def test_array_element_must_be_object(self, codec):
        """Test that a non-object field inside an array fails."""
        with pytest.raises(InvalidEncodingError):
            codec.decode("F9" + "2400000001")

    def test_unknown_field_header(self, codec):
        """Test that an unregistered header fails."""
        with pytest.raises(UnknownFieldError):
            codec.decode("20FF00000001")

    def test_unknown_enum_code(self, codec):
        """Test that an unregistered transaction type code fails."""
        with pytest.raises(InvalidEncodingError):
            codec.decode("12FFFF")

    def test_trailing_bytes_after_end_marker(self, codec):
        """Test that bytes after a top-level object end marker fail."""
        with pytest.raises(InvalidEncodingError):
            codec.decode("120000" + "E1" + "2400000001")

    def test_invalid_hex(self, codec):
        """Test that non-hex input fails."""
        with pytest.raises(InvalidEncodingError):
            codec.decode("ZZ")

    def test_empty_input(self, codec):
        """Test that an empty buffer decodes to an empty object."""
        assert codec.decode("") == {}


@pytest.mark.unit
class TestXAddressFields:
    """Test X-Addresses in account fields."""

    def test_destination_tag_from_x_address(self, codec, payment_tx):
        """Test that a tagged X-Address destination becomes a DestinationTag."""
        x_address = AddressCodec.classic_address_to_x_address(payment_tx["Destination"], 12345)
        with_x = dict(payment_tx, Destination=x_address)
        with_tag = dict(payment_tx, DestinationTag=12345)
        assert codec.encode(with_x) == codec.encode(with_tag)

    def test_source_tag_from_x_address(self, codec, payment_tx):
        """Test that a tagged X-Address account becomes a SourceTag."""
        x_address = AddressCodec.classic_address_to_x_address(payment_tx["Account"], 7, test=True)
        with_x = dict(payment_tx, Account=x_address)
        with_tag = dict(payment_tx, SourceTag=7)
        assert codec.encode(with_x) == codec.encode(with_tag)

    def test_untagged_x_address(self, codec, payment_tx):
        """Test that an untagged X-Address encodes like its classic address."""
        x_address = AddressCodec.classic_address_to_x_address(payment_tx["Destination"])
        assert codec.encode(dict(payment_tx, Destination=x_address)) == codec.encode(payment_tx)

    def test_conflicting_tag(self, codec, payment_tx):
        """Test that an X-Address tag and an explicit tag cannot both be given."""
        x_address = AddressCodec.classic_address_to_x_address(payment_tx["Destination"], 1)
        tx = dict(payment_tx, Destination=x_address, DestinationTag=1)
        with pytest.raises(MalformedInputError):
            codec.encode(tx)

    def test_tagged_x_address_in_other_field(self, codec, payment_tx):
        """Test that a tagged X-Address is rejected where no tag field exists."""
        x_address = AddressCodec.classic_address_to_x_address(payment_tx["Destination"], 1)
        with pytest.raises(MalformedInputError):
            codec.encode({"Owner": x_address})


@pytest.mark.unit
class TestSigningEncodings:
    """Test single, multi and claim signing encodings."""

    def test_single_signing(self, codec, payment_tx):
        """Test that single signing drops the signature and adds the prefix."""
        expected = "53545800" + _payment_hex(payment_tx, include_signature=False)
        assert codec.encode_for_signing(payment_tx) == expected

    def test_signing_does_not_mutate_input(self, codec, payment_tx):
        """Test that the caller's object is left untouched."""
        before = dict(payment_tx)
        codec.encode_for_signing(payment_tx)
        codec.encode_for_multisigning(payment_tx, payment_tx["Account"])
        assert payment_tx == before

    def test_filter_is_shallow(self, codec, payment_tx, make_address):
        """Test that only top-level fields are filtered."""
        tx = dict(payment_tx)
        tx["Memos"] = [{"Memo": {"MemoData": "01", "TxnSignature": "DEAD"}}]
        tx["Signers"] = [{"Signer": {
            "Account": make_address(0x55),
            "SigningPubKey": "02" + "EE" * 32,
            "TxnSignature": "BEEF",
        }}]

        filtered = codec.remove_non_signing_fields(tx)
        assert "TxnSignature" not in filtered
        assert "Signers" not in filtered
        assert filtered["Memos"] == tx["Memos"]

        signed = codec.encode_for_signing(tx)
        decoded = codec.decode(signed[len("53545800"):])
        assert decoded["Memos"][0]["Memo"]["TxnSignature"] == "DEAD"
        assert "Signers" not in decoded

    def test_filter_drops_unknown_fields(self, codec):
        """Test that keys missing from the registry are removed."""
        assert codec.remove_non_signing_fields({"Sequence": 1, "Bogus": 2}) == {"Sequence": 1}

    def test_filter_passes_through_non_objects(self, codec):
        """Test that non-object values are returned unchanged."""
        assert codec.remove_non_signing_fields([1, 2]) == [1, 2]

    def test_multisigning(self, codec, payment_tx, make_address):
        """Test that multi-signing empties SigningPubKey and appends the signer."""
        signer = make_address(0x66)
        expected = (
            "534D5400"
            + _payment_hex(payment_tx, include_signature=False, signing_pub_key="")
            + "66" * 20
        )
        assert codec.encode_for_multisigning(payment_tx, signer) == expected

    def test_multisigning_adds_signing_pub_key(self, codec, genesis_address):
        """Test that SigningPubKey is present even when the input omits it."""
        result = codec.encode_for_multisigning({"Sequence": 1}, genesis_address)
        assert result == "534D5400" + "2400000001" + "7300" + GENESIS_ACCOUNT_ID

    def test_multisigning_requires_object(self, codec, genesis_address):
        """Test that a non-object payload is rejected."""
        with pytest.raises(InvalidArgumentError):
            codec.encode_for_multisigning([1, 2], genesis_address)
        with pytest.raises(InvalidArgumentError):
            codec.encode_for_multisigning("[1, 2]", genesis_address)

    def test_multisigning_bad_signer(self, codec, payment_tx):
        """Test that an invalid signer address is rejected."""
        with pytest.raises(MalformedInputError):
            codec.encode_for_multisigning(payment_tx, "not-an-address")

    def test_claim(self, codec):
        """Test the payment channel claim encoding."""
        claim = {
            "channel": "43904CBFCDCEC530B4037871F86EE90BF799DF8D2E0EA564BC8A3F332E4F5FB1",
            "amount": "1000",
        }
        assert codec.encode_for_signing_claim(claim) == (
            "434C4D00"
            + "43904CBFCDCEC530B4037871F86EE90BF799DF8D2E0EA564BC8A3F332E4F5FB1"
            + "00000000000003E8"
        )

    def test_claim_requires_fields(self, codec):
        """Test that a claim without an amount is rejected."""
        with pytest.raises(InvalidArgumentError):
            codec.encode_for_signing_claim({"channel": "00" * 32})

    def test_claim_amount_must_be_drops(self, codec):
        """Test that a non-integer claim amount is rejected."""
        with pytest.raises(MalformedInputError):
            codec.encode_for_signing_claim({"channel": "00" * 32, "amount": "1.5"})


@pytest.mark.unit
class TestTransactionHash:
    """Test transaction id computation."""

    def test_hash_matches_digest(self, codec, payment_tx):
        """Test that the id is SHA-512Half of the prefixed blob."""
        blob = codec.encode(payment_tx)
        expected = hashlib.sha512(bytes.fromhex("54584E00" + blob)).digest()[:32].hex().upper()
        assert codec.transaction_hash(blob) == expected
        assert len(codec.transaction_hash(blob)) == 64

    def test_hash_depends_on_signature(self, codec, payment_tx):
        """Test that changing the signature changes the id."""
        other = dict(payment_tx, TxnSignature="3045" + "00" * 20)
        assert codec.transaction_hash(codec.encode(payment_tx)) != codec.transaction_hash(codec.encode(other))


@pytest.mark.unit
class TestCustomDefinitions:
    """Test codec instances with their own definitions."""

    def test_codec_uses_injected_definitions(self, definitions):
        """Test that the codec keeps the definitions it was given."""
        assert BinaryCodec(definitions).definitions is definitions
