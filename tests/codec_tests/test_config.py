"""
********************************************************************************
* Copyright (c) 2025 the bignumber authors
*
* This program and the accompanying materials are made available under the
* terms of the Eclipse Public License 2.0 which is available at
* http://www.eclipse.org/legal/epl-2.0.
*
* This Source Code may also be made available under the following Secondary
* Licenses when the conditions for such availability set forth in the Eclipse
* Public License, v. 2.0 are satisfied: GNU General Public License, version 2
* with the GNU Classpath Exception which is
* available at https://www.gnu.org/software/classpath/license.html.
*
* SPDX-License-Identifier: EPL-2.0 OR GPL-2.0 WITH Classpath-exception-2.0
********************************************************************************
"""

import importlib

import pytest

from bignumber import InvalidArgument


def _reload_config():
    from bignumber import config

    return importlib.reload(config)


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    yield
    monkeypatch.undo()
    _reload_config()


def test_defaults(monkeypatch):
    monkeypatch.delenv("BIGNUMBER_DECIMAL_RENDER", raising=False)
    monkeypatch.delenv("BIGNUMBER_DEFAULT_BASE", raising=False)
    config = _reload_config()
    assert config.decimal_render_method == "doubling"
    assert config.default_base == 10


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BIGNUMBER_DECIMAL_RENDER", "Division")
    monkeypatch.setenv("BIGNUMBER_DEFAULT_BASE", "16")
    config = _reload_config()
    assert config.decimal_render_method == "division"
    assert config.default_base == 16


@pytest.mark.parametrize("variable, value", [
    ("BIGNUMBER_DECIMAL_RENDER", "karatsuba"),
    ("BIGNUMBER_DEFAULT_BASE", "37"),
    ("BIGNUMBER_DEFAULT_BASE", "1"),
    ("BIGNUMBER_DEFAULT_BASE", "hex"),
])
def test_invalid_environment(monkeypatch, variable, value):
    monkeypatch.setenv(variable, value)
    with pytest.raises(InvalidArgument):
        _reload_config()


def test_non_numeric_base_names_variable(monkeypatch):
    monkeypatch.setenv("BIGNUMBER_DEFAULT_BASE", "sixteen")
    with pytest.raises(InvalidArgument, match="BIGNUMBER_DEFAULT_BASE"):
        _reload_config()
