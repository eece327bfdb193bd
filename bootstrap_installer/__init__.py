# -*- coding: utf-8 -*-
"""
Bootstrap package for the Jupyter Notebook installer.

Each bs_* module holds one step of the run; bootstrap_process strings them
together for the selected install mode.
"""
