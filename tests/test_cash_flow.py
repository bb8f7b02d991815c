import pytest

from dsalgo.cash_flow import Payment, min_cash_flow, net_amounts

EXAMPLE = [
    [0, 1000, 2000],
    [0, 0, 5000],
    [0, 0, 0],
]


def apply(balances, payments):
    result = list(balances)
    for p in payments:
        result[p.debtor] += p.amount
        result[p.creditor] -= p.amount
    return result


def test_example_payments():
    assert min_cash_flow(EXAMPLE) == [Payment(1, 2, 4000), Payment(0, 2, 3000)]


def test_net_amounts_sum_to_zero():
    debts = [[0, 7, 3, 1], [2, 0, 0, 9], [4, 4, 0, 0], [0, 1, 8, 0]]
    assert sum(net_amounts(debts)) == 0


def test_payments_settle_everything():
    debts = [[0, 7, 3, 1], [2, 0, 0, 9], [4, 4, 0, 0], [0, 1, 8, 0]]
    payments = min_cash_flow(debts)
    assert apply(net_amounts(debts), payments) == [0, 0, 0, 0]
    assert all(p.amount > 0 for p in payments)
    assert len(payments) <= len(debts) - 1


def test_balanced_debts_need_no_payment():
    assert min_cash_flow([[0, 5], [5, 0]]) == []


def test_empty_group():
    assert min_cash_flow([]) == []


def test_non_square_rejected():
    with pytest.raises(ValueError):
        net_amounts([[0, 1], [0]])