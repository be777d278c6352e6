"""CLI commands for leonidas.

Key Commands:
    run (leonidas.main):
        Prepares the plan or execute prompt for the agent executor and
        writes the step outputs the workflow passes to it.

    post-process (leonidas.cli.post_process):
        Command group for the steps after the executor: sub-issue linking,
        completion and failure comments, rescue of partial work, PR labels
        and CI dispatch.

Usage Examples:
    Prepare a plan run from a GitHub Actions event::

        $ leonidas run --mode plan

    Preserve work left by an interrupted execution::

        $ leonidas post-process rescue --issue-number 42
"""

from leonidas.cli.post_process import post_process_group

__all__ = ["post_process_group"]
