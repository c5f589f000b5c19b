from src.dayflow.dayflow.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_net_is_base_plus_allowances_minus_deductions():
    assert StandardPayrollCalculator().net_salary(5000, 500, 200) == 5300.0


def test_net_rounds_to_cents():
    assert StandardPayrollCalculator().net_salary(1000.333, 0, 0) == 1000.33


def test_net_may_go_negative():
    assert StandardPayrollCalculator().net_salary(100, 0, 250) == -150.0
