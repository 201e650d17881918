"""
JSON Schema generator for the scenario input model.

This module generates the JSON schema of ScenarioInput so form builders and
API clients can validate payloads before sending them.
"""

import json
from pathlib import Path
from typing import Any, Dict

from .scenario import ScenarioInput


def generate_scenario_schema() -> Dict[str, Any]:
    """Generate JSON schema for the ScenarioInput model."""
    return ScenarioInput.model_json_schema()


def save_scenario_schema(output_path: Path) -> None:
    """Save the scenario JSON schema to a file."""
    schema = generate_scenario_schema()

    schema.update(
        {
            "$schema": "http://json-schema.org/draft-07/schema#",
            "$id": "https://mortgage-planner.local/schema/scenario_input_v1.json",
            "title": "Home Purchase Scenario Input v1",
            "description": "Property, mortgage, investing, profile and pledge parameters of a home purchase scenario",
        }
    )

    with open(output_path, "w") as f:
        json.dump(schema, f, indent=2)


if __name__ == "__main__":
    schema_path = Path(__file__).parent.parent.parent / "schema" / "scenario_input_v1.json"
    schema_path.parent.mkdir(parents=True, exist_ok=True)
    save_scenario_schema(schema_path)
    print(f"Schema saved to {schema_path}")
