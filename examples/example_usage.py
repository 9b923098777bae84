"""Example: use the service layer directly (no Flask).

Prints the summary and risk tier of every enrolled subject for one student.
"""

import sys

from config import load_settings

from src.attendance_tracker.attendance_tracker.container import build_container


def main(student_id: str) -> None:
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG)
    for s in container.aggregator.summarize(student_id, sort_by_percentage=True):
        tier = container.classifier.classify(s.attendance_percentage)
        print(f"{s.subject_code:<10} {s.classes_attended}/{s.total_classes} {s.attendance_percentage:6.2f}% {tier.value}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "demo-student")
