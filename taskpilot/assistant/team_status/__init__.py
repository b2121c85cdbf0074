from .flow import GENERATE_TEAM_STATUS_SUMMARY_FLOW, GenerateTeamStatusSummaryFlow
from .models import GenerateTeamStatusSummaryInput, GenerateTeamStatusSummaryOutput

__all__ = [
    "GENERATE_TEAM_STATUS_SUMMARY_FLOW",
    "GenerateTeamStatusSummaryFlow",
    "GenerateTeamStatusSummaryInput",
    "GenerateTeamStatusSummaryOutput",
]
