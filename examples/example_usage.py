"""Example: drive the service layer directly, no UI involved."""

from datetime import date

from src.employee_records.employee_records.core.enums import Designation, LeaveType
from src.employee_records.employee_records.employees.model import Employee
from src.employee_records.employee_records.leaves.model import NewLeaveApplication
from src.employee_records.employee_records.main import bootstrap


def main():
    container = bootstrap()
    today = date.today()

    employee = container.employee_service.register(
        Employee(
            employee_number="",
            full_name="Kamal Perera",
            designation=Designation.DEVELOPMENT_OFFICER,
            nic_number="851234567V",
            mobile_number="071 234 5678",
            email_address="kamal@example.lk",
        )
    )
    print(employee.employee_number, employee.date_of_birth, employee.retired_date)

    container.attendance_service.mark_attendance(employee.employee_id, today.month, today.year, 1, "present")
    print(container.attendance_service.get_monthly_attendance_summary(employee.employee_id, today.month, today.year))

    application = container.leave_service.submit_leave(
        NewLeaveApplication(
            employee_id=employee.employee_id,
            employee_number=employee.employee_number,
            leave_type=LeaveType.CASUAL_LEAVE,
            start_date="05-01-2027",
            end_date="06-01-2027",
            reason="Family event",
        )
    )
    container.leave_service.approve(application.application_id, "Administrator")
    print(container.leave_service.get(application.application_id))


if __name__ == "__main__":
    main()
