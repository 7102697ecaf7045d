# tests/plugins/test_selective_deploy_report.py
"""
Testes do resumo emitido pelo plugin `selective_deploy`.

Os testes asseguram que:
- o canal verbose recebe cabeçalho, linha de excluídas e linha de incluídas
- o canal notice recebe exatamente uma linha de resumo por passada
- os três números do resumo batem com a partição
- a dica de `--verbose` aparece se e somente se a verbosidade está desligada

Decisões arquiteturais:
    - Os canais são independentes: o plugin escreve nos dois sempre,
      a exibição é decidida por quem renderiza
"""

import pytest

try:
    from selective_deploy.plugins.selective_deploy import VERBOSE_PROMPT
except Exception as e:  # noqa: BLE001
    VERBOSE_PROMPT = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing selective_deploy plugin. Implement:\n"
            "- src/selective_deploy/plugins/selective_deploy.py (VERBOSE_PROMPT)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_verbose_channel_lists_excluded_and_included(make_plugin, dummy_ctx):
    _require_imports()
    dummy_ctx.options["verbose"] = True
    plugin = make_plugin({
        "func1": {"toDeploy": False},
        "func2": {"toDeploy": True},
    })

    plugin.apply_filter()

    assert dummy_ctx.messages("verbose") == [
        "Pre-deployment unit summary:",
        "Excluded 1 unit(s): func1",
        "Included 1 unit(s): func2",
    ]


def test_verbose_lines_join_names_in_enumeration_order(make_plugin, dummy_ctx):
    _require_imports()
    plugin = make_plugin({
        "zeta": {"toDeploy": False},
        "alpha": {},
        "mid": {"toDeploy": False},
        "beta": {"toDeploy": True},
    })

    plugin.apply_filter()

    verbose = dummy_ctx.messages("verbose")
    assert verbose[1] == "Excluded 2 unit(s): zeta, mid"
    assert verbose[2] == "Included 2 unit(s): alpha, beta"


def test_verbose_lines_emitted_even_when_verbosity_disabled(make_plugin, dummy_ctx):
    _require_imports()
    plugin = make_plugin({"func1": {}})

    plugin.apply_filter()

    assert dummy_ctx.messages("verbose") == [
        "Pre-deployment unit summary:",
        "Excluded 0 unit(s): ",
        "Included 1 unit(s): func1",
    ]


def test_notice_counts(make_plugin, dummy_ctx):
    _require_imports()
    plugin = make_plugin({
        "func1": {"toDeploy": False},
        "func2": {"toDeploy": True},
        "func3": {"toDeploy": False},
    })

    plugin.apply_filter()

    notice = dummy_ctx.messages("notice")
    assert len(notice) == 1
    assert "Excluded 2 unit(s) from deployment" in notice[0]
    assert "deploying 1 of 3 unit(s)" in notice[0]

    event = [e for e in dummy_ctx.events if e["level"] == "notice"][0]
    assert event["step_id"] == "selective_deploy"
    assert event["excluded"] + event["kept"] == event["total"] == 3


def test_scenario_summary_with_hint(make_plugin, dummy_ctx):
    _require_imports()
    plugin = make_plugin({
        "a": {"toDeploy": False},
        "b": {"toDeploy": True},
        "c": {},
    })

    plugin.apply_filter()

    assert dummy_ctx.messages("notice") == [
        "Excluded 1 unit(s) from deployment, deploying 2 of 3 unit(s)."
        " For more details, use --verbose command."
    ]


@pytest.mark.parametrize("verbose", [False, None, 0, ""])
def test_hint_present_when_verbosity_falsy(make_plugin, dummy_ctx, verbose):
    _require_imports()
    dummy_ctx.options["verbose"] = verbose
    plugin = make_plugin({"func1": {"toDeploy": False}})

    plugin.apply_filter()

    assert dummy_ctx.messages("notice")[0].endswith(VERBOSE_PROMPT)


def test_hint_present_when_verbose_option_missing(make_plugin, dummy_ctx):
    _require_imports()
    dummy_ctx.options.pop("verbose")
    plugin = make_plugin({"func1": {}})

    plugin.apply_filter()

    assert "For more details, use --verbose command" in dummy_ctx.messages("notice")[0]


def test_hint_absent_when_verbose_enabled(make_plugin, dummy_ctx):
    _require_imports()
    dummy_ctx.options["verbose"] = True
    plugin = make_plugin({"func1": {"toDeploy": False}})

    plugin.apply_filter()

    assert dummy_ctx.messages("notice") == [
        "Excluded 1 unit(s) from deployment, deploying 0 of 1 unit(s)."
    ]


def test_all_excluded_summary(make_plugin, service, dummy_ctx):
    _require_imports()
    dummy_ctx.options["verbose"] = True
    plugin = make_plugin({"a": {"toDeploy": False}, "b": {"toDeploy": False}})

    plugin.apply_filter()

    assert service.registry.names() == []
    assert dummy_ctx.messages("notice") == [
        "Excluded 2 unit(s) from deployment, deploying 0 of 2 unit(s)."
    ]
    assert dummy_ctx.messages("verbose")[2] == "Included 0 unit(s): "
