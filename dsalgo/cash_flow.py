"""Settle debts among a group with as few payments as the greedy scheme gives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Payment:
    """``debtor`` pays ``amount`` to ``creditor``."""

    debtor: int
    creditor: int
    amount: int


def net_amounts(debts):
    """Return each person's net balance; ``debts[i][j]`` is what i owes j."""
    rows = [list(row) for row in debts]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("debt matrix must be square")
    return [
        sum(rows[i][p] - rows[p][i] for i in range(len(rows)))
        for p in range(len(rows))
    ]


def min_cash_flow(debts):
    """Return the payments that settle all debts, largest debtor to largest creditor first."""
    amount = net_amounts(debts)
    payments = []
    while amount:
        credit = max(range(len(amount)), key=amount.__getitem__)
        debit = min(range(len(amount)), key=amount.__getitem__)
        if amount[credit] == 0 and amount[debit] == 0:
            break
        paid = min(-amount[debit], amount[credit])
        amount[credit] -= paid
        amount[debit] += paid
        payments.append(Payment(debit, credit, paid))
    return payments