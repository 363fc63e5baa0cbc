"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; submitting absences and reading statistics
both go through the services built by the container.
"""

from src.kindergarten_portal.kindergarten_portal.container import build_container


def main():
    container = build_container()
    container.absence_service.submit(child_id="child-1", dates=["2024-02-05", "2024-02-12"], reason="flu")
    stats = container.attendance_service.get_stats("child-1", month=2, year=2024)
    print(stats.to_dict())
    print([n.to_dict() for n in container.absence_service.list_notifications()])


if __name__ == "__main__":
    main()
