"""Unit tests for push reconciliation."""

from conftest import make_contract

from contract_pusher.reconcile import find_unpushed, is_complete, is_pushed
from contract_pusher.types import PushedContract, UnpushedContract


class TestIsPushed:
    """Test the is_pushed function."""

    def test_matches_regardless_of_local_casing(self):
        pushed = [PushedContract(address="0xabc", network_id="1")]

        assert is_pushed("0xAbC", "1", pushed)

    def test_network_id_must_match(self):
        pushed = [PushedContract(address="0xabc", network_id="4")]

        assert not is_pushed("0xabc", "1", pushed)

    def test_address_must_match(self):
        pushed = [PushedContract(address="0xabd", network_id="1")]

        assert not is_pushed("0xabc", "1", pushed)

    def test_empty_response(self):
        assert not is_pushed("0xabc", "1", [])


class TestFindUnpushed:
    """Test the find_unpushed function."""

    def test_all_matched(self):
        contracts = [make_contract("Token", {"1": "0xAbC"})]
        pushed = [PushedContract(address="0xabc", network_id="1")]

        assert find_unpushed(contracts, pushed) == []

    def test_lists_every_unmatched_pair(self):
        contracts = [
            make_contract("Token", {"1": "0xAAA", "4": "0xBBB"}),
            make_contract("Crowdsale", {"1": "0xCCC"}),
        ]
        pushed = [PushedContract(address="0xaaa", network_id="1")]

        assert find_unpushed(contracts, pushed) == [
            UnpushedContract(name="Token", network_id="4", address="0xBBB"),
            UnpushedContract(name="Crowdsale", network_id="1", address="0xCCC"),
        ]

    def test_keeps_original_casing(self):
        contracts = [make_contract("Token", {"1": "0xAbCdEf"})]

        unpushed = find_unpushed(contracts, [])

        assert unpushed[0].address == "0xAbCdEf"

    def test_skips_unbound_contracts(self):
        contracts = [make_contract("SafeMath", {})]

        assert find_unpushed(contracts, []) == []


class TestIsComplete:
    """Test the count-first success check."""

    def test_equal_counts_are_complete(self):
        pushed = [PushedContract(address=f"0x{i}", network_id="1") for i in range(3)]

        assert is_complete(pushed, 3)

    def test_equal_counts_win_over_pair_mismatch(self):
        contracts = [
            make_contract("A", {"1": "0xa"}),
            make_contract("B", {"1": "0xb"}),
            make_contract("C", {"1": "0xc"}),
        ]
        # Third entry has a network id typo, so one pair does not match
        pushed = [
            PushedContract(address="0xa", network_id="1"),
            PushedContract(address="0xb", network_id="1"),
            PushedContract(address="0xc", network_id="11"),
        ]

        assert is_complete(pushed, 3)
        assert len(find_unpushed(contracts, pushed)) == 1

    def test_different_counts_are_incomplete(self):
        pushed = [PushedContract(address="0xa", network_id="1")]

        assert not is_complete(pushed, 2)
        assert not is_complete(pushed + pushed, 1)
