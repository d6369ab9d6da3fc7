# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Utilities for submitting production jobs.

`Renderer` turns the validated `Production` settings into an HTCondor submit
description, `SummaryPresenter` displays the settings of the submitted jobs,
and `Submitter` hands the rendered file over to `condor_submit` (or, in dry-run
mode, explains how to do so manually) and reports the resulting cluster id.
"""

from .presenter import SummaryPresenter
from .renderer import Renderer
from .submitter import Submitter

__all__ = ["Renderer", "SummaryPresenter", "Submitter"]
