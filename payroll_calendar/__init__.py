"""
Payroll calendar: month grids with paydays, US holidays and totals.
"""
