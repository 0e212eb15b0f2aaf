"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from extguard.contracts import Artifact, Report


def generate_schemas():
    """Generate JSON schemas for the public models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    # Generate report schema
    report_schema = Report.model_json_schema()
    report_schema_path = schemas_dir / "report.schema.json"
    with open(report_schema_path, 'w', encoding='utf-8') as f:
        json.dump(report_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {report_schema_path}")

    # Generate artifact schema
    artifact_schema = Artifact.model_json_schema()
    artifact_schema_path = schemas_dir / "artifact.schema.json"
    with open(artifact_schema_path, 'w', encoding='utf-8') as f:
        json.dump(artifact_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {artifact_schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
