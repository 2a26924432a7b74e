"""
Step definitions for Controller Options scenarios.
"""

import yaml
from behave import given, when, then

from controller_options.core.controllers import DEFAULT_ENABLED_CONTROLLERS
from controller_options.core.exceptions import OptionsValidationError
from controller_options.parsers.config_file import load_options


def _split(value):
    return [item.strip() for item in value.split(",") if item.strip()]


def _write_config(context, config):
    with open(context.config_file, "w") as f:
        yaml.dump(config, f)


@given('a config file with controllers "{controllers}"')
def step_impl(context, controllers):
    """Write a config file enabling the given controllers."""
    _write_config(context, {"controllers": _split(controllers)})


@given('a config file with DNS01 recursive nameservers "{servers}"')
def step_impl(context, servers):
    """Write a config file with the given nameservers."""
    _write_config(context, {"dns01-recursive-nameservers": _split(servers)})


@when("I load and validate the options")
def step_impl(context):
    """Load the config file and validate it."""
    context.options = load_options(str(context.config_file))
    try:
        context.options.validate()
    except OptionsValidationError as e:
        context.validation_error = e
        return

    context.enabled = context.options.enabled_controllers()


@then("validation should succeed")
def step_impl(context):
    """Verify that validation passed."""
    assert context.validation_error is None, f"Unexpected error: {context.validation_error}"


@then('validation should fail with "{message}"')
def step_impl(context, message):
    """Verify that validation failed with the expected message."""
    assert context.validation_error is not None, "Expected validation to fail"
    assert message in str(context.validation_error), str(context.validation_error)


@then('the error should mention "{value}"')
def step_impl(context, value):
    """Verify that the error names the offending value."""
    assert value in str(context.validation_error), str(context.validation_error)


@then('the enabled controllers should be the defaults without "{disabled}"')
def step_impl(context, disabled):
    """Verify the default set minus the disabled controllers."""
    expected = set(DEFAULT_ENABLED_CONTROLLERS) - set(_split(disabled))
    assert context.enabled == expected, f"Got {sorted(context.enabled)}"


@then('the enabled controllers should be exactly "{names}"')
def step_impl(context, names):
    """Verify the exact enabled set."""
    assert context.enabled == set(_split(names)), f"Got {sorted(context.enabled)}"
