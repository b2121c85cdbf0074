"""Sample domain data for assistant tests."""

from taskpilot.assistant.models import DistributionTask, Priority, Task, TeamMember


def sample_tasks() -> list[Task]:
    return [
        Task(
            id="A",
            title="Write report",
            description="Quarterly numbers",
            due_date="2024-01-02T09:00:00.000Z",
            priority=Priority.HIGH,
            estimated_duration=90.0,
            tags=["work", "finance"],
        ),
        Task(id="B", title="Call plumber", priority="Low"),
    ]


def sample_distribution_tasks() -> list[DistributionTask]:
    return [
        DistributionTask(
            id="t1",
            title="Build login page",
            description="Form plus validation",
            priority=Priority.CRITICAL,
            estimated_duration=6.0,
            required_skills=["react", "css"],
        ),
        DistributionTask(
            id="t2",
            title="Tune queries",
            description="Slow dashboard",
            priority=Priority.MEDIUM,
            estimated_duration=3.5,
            required_skills=["sql"],
        ),
    ]


def sample_members() -> list[TeamMember]:
    return [
        TeamMember(
            id="m1", name="Ada", available_hours_per_week=40.0, skills=["react", "css", "python"], current_workload=10.0
        ),
        TeamMember(id="m2", name="Linus", available_hours_per_week=20.0, skills=["sql"], current_workload=18.0),
    ]
