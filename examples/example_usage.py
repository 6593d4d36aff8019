"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

from attendance_tracker.classes.service import ClassWorkflow
from attendance_tracker.container import build_container
from attendance_tracker.storage.memory_store import InMemoryKeyValueStore


def main():
    container = build_container(store=InMemoryKeyValueStore())
    session = container.auth_service.login(name="Alice", subject="Math", semester="3", password="secret1")

    alice = container.roster_service.add_student(session, "Alice Nguyen", "101")
    container.roster_service.add_student(session, "Bob Tran", "102")

    workflow = ClassWorkflow(container.roster_service, session)
    workflow.start_class()
    workflow.toggle(alice.student_id, "present")
    workflow.commit()

    print(container.report_service.export_csv(session))


if __name__ == "__main__":
    main()
