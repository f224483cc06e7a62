"""Shared fixtures for paycheck allocation tests."""

import pytest


@pytest.fixture()
def sample_obligations():
    """Standard set of monthly bills for testing."""
    return [
        {"id": 1, "name": "Rent", "amount": 8000, "priority": "high"},
        {"id": 2, "name": "Internet", "amount": 1500, "priority": "high"},
        {"id": 3, "name": "Gym", "amount": 900, "priority": "low"},
    ]


@pytest.fixture()
def sample_goals():
    """Standard set of savings goals for testing."""
    return [
        {
            "id": 1,
            "name": "Emergency Fund",
            "target_amount": 50000,
            "current_amount": 12000,
            "monthly_plan": 3000,
            "priority": "high",
        },
        {
            "id": 2,
            "name": "Laptop",
            "target_amount": 40000,
            "current_amount": 38500,
            "monthly_plan": 0,
            "priority": "medium",
        },
        {
            "id": 3,
            "name": "Vacation",
            "target_amount": 20000,
            "current_amount": 0,
            "monthly_plan": 1000,
            "priority": "low",
        },
    ]


@pytest.fixture()
def sample_event(sample_obligations, sample_goals):
    """Client-shaped event with camelCase goal fields."""
    goals = [
        {
            "id": g["id"],
            "name": g["name"],
            "targetAmount": g["target_amount"],
            "currentAmount": g["current_amount"],
            "monthlyPlan": g["monthly_plan"],
            "priority": g["priority"],
            "accountId": None,
        }
        for g in sample_goals
    ]
    return {
        "actual_income": 12000,
        "spending_allowance": 2000,
        "obligations": sample_obligations,
        "goals": goals,
    }
