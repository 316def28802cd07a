"""Deployment report assembly and persistence"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import (
    NEXT_STEPS_BY_STAGE,
    NEXT_STEPS_FAILURE,
    NEXT_STEPS_SUCCESS_HEAD,
    NEXT_STEPS_SUCCESS_TAIL,
    NEXT_STEPS_SUCCESS_TEST_URL,
)
from ..models.config import DeploymentConfig
from ..models.result import DeploymentReport, PipelineStage, ReportStatus, RunAccumulator

logger = logging.getLogger(__name__)


def next_steps_for(status: ReportStatus,
                   verification_urls=(),
                   stage: Optional[PipelineStage] = None) -> List[str]:
    """
    Select follow-up steps for a finished run

    Args:
        status: Final report status
        verification_urls: URLs to test after a successful deployment
        stage: Stage responsible for the failure, if known

    Returns:
        Ordered list of steps
    """
    if status == ReportStatus.SUCCESS:
        steps = [NEXT_STEPS_SUCCESS_HEAD]
        steps.extend(NEXT_STEPS_SUCCESS_TEST_URL.format(url=url) for url in verification_urls)
        steps.extend(NEXT_STEPS_SUCCESS_TAIL)
        return steps

    steps = []
    if stage is not None and stage.value in NEXT_STEPS_BY_STAGE:
        steps.append(NEXT_STEPS_BY_STAGE[stage.value])
    steps.extend(NEXT_STEPS_FAILURE)
    return steps


class ReportBuilder:
    """Turn the run's accumulated errors and warnings into a report"""

    def __init__(self, config: DeploymentConfig, accumulator: RunAccumulator):
        self.config = config
        self.accumulator = accumulator

    def build(self) -> DeploymentReport:
        """
        Build the final report

        Status is FAILED if and only if at least one error was recorded;
        warnings never change it.
        """
        status = ReportStatus.FAILED if self.accumulator.has_errors else ReportStatus.SUCCESS

        stage = self.accumulator.failed_stage
        if stage is None and self.accumulator.error_stages:
            stage = self.accumulator.error_stages[0]

        return DeploymentReport(
            status=status,
            errors=tuple(self.accumulator.errors),
            warnings=tuple(self.accumulator.warnings),
            info=tuple(self.accumulator.info),
            verification_urls=tuple(self.config.verification_urls),
            next_steps=tuple(next_steps_for(status, self.config.verification_urls, stage)),
            failed_stage=stage if status == ReportStatus.FAILED else None
        )

    @staticmethod
    def save(report: DeploymentReport, path: Union[str, Path]) -> Path:
        """
        Write the report as JSON

        Args:
            report: Report to persist
            path: Destination file

        Returns:
            Path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            f.write('\n')
        logger.debug(f"Report written to {path}")
        return path


def load_report(path: Union[str, Path]) -> DeploymentReport:
    """Load a previously saved report"""
    with open(path, 'r', encoding='utf-8') as f:
        return DeploymentReport.from_dict(json.load(f))
