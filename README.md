# krograph

Building blocks for working with resource groups: collections of
Kubernetes objects whose fields may hold `${...}` expressions that refer
to one another. The package has no dependencies outside the standard
library.

## Modules

- `krograph.expressions`: find `${...}` expressions in strings
  (`extract_expressions`, `is_standalone_expression`) and check that
  readiness or inclusion conditions are single standalone expressions
  (`parse_condition_expressions`, which returns them with `${` and `}`
  stripped). Nested expressions raise `NestedExpressionError`; conditions
  that are not standalone raise `ConditionExpressionError`.
- `krograph.parser`: walk a resource and collect every field holding
  expressions as `FieldDescriptor` objects. `parse_resource` checks values
  against a `Schema` and records the expected type at each path (raising
  `ParseError` on mismatches); `parse_schemaless_resource` works without a
  schema and marks every type as `"any"`. `join_path_and_field_name` builds
  the paths, bracket-quoting empty or dotted field names.
- `krograph.spec`: a `Schema` dataclass for OpenAPI nodes, with
  `AdditionalProperties`; `convert_json_schema_props` turns a CRD-style
  JSON schema dict into a `Schema`, and `top_level_field_names` lists the
  sorted top-level properties other than `apiVersion` and `kind`.
- `krograph.inference`: `infer_schema` builds a JSON schema dict from a
  plain Python value (`bool`, `int`, `float`, `str`, lists and mappings);
  other values raise `UnsupportedTypeError`.
- `krograph.variable`: `FieldDescriptor`, `ResourceField` and the
  `ResourceVariableKind` enum (`static`, `dynamic`, `readyWhen`,
  `includeWhen`).
- `krograph.resource`: the `Resource` dataclass, with dependency tracking
  (`has_dependency`, `add_dependency`, `add_dependencies`),
  `top_level_fields` and `deep_copy`.
- `krograph.validation`: naming rules for resource IDs and kinds
  (`is_valid_resource_id`, `is_valid_kind_name`, `is_reserved_word`,
  `validate_naming_conventions`, `validate_resource_ids`), apiVersion
  parsing (`parse_group_version`) and structural checks of Kubernetes
  objects (`validate_kubernetes_object_structure`,
  `validate_kubernetes_version`). Failures raise `ValidationError`.
- `krograph.meta`: `ObjectMeta`, `GroupVersionKind`,
  `GroupVersionResource`, `OwnerReference` and `LabelSelector`;
  `extract_gvk`, `instance_gvk`, `instance_gvr`, `gvk_to_gvr`,
  `gvr_to_gvk`, simple English `pluralize` / `singularize`, owner
  reference and selector builders, and the label key constants.
- `krograph.labels`: `GenericLabeler` (a `dict` that can apply itself to
  an `ObjectMeta` and merge with another labeler, raising
  `DuplicateLabelsError` on shared keys), `is_kro_owned`,
  `set_kro_owned`, `set_kro_unowned` and labeler builders for resource
  groups, instances and controller metadata.
- `krograph.finalizers`: add, remove and check the resource group and
  per-instance finalizers on an `ObjectMeta` or on a plain unstructured
  dict; malformed finalizer lists raise `FinalizerError`.
- `krograph.requeue`: the exceptions `NoRequeue`, `RequeueNeeded` and
  `RequeueNeededAfter` (with a `duration`), plus the builders
  `no_requeue`, `requeue_needed` and `requeue_needed_after`.

## Example

```python
from krograph.expressions import extract_expressions
from krograph.parser import parse_schemaless_resource
from krograph.validation import validate_kubernetes_object_structure

extract_expressions("${a.b}-middle-${c.d}")
# ['a.b', 'c.d']

for field in parse_schemaless_resource({"status": {"arn": "${cluster.status.arn}"}}):
    print(field.path, field.expressions)
# status.arn ['cluster.status.arn']

validate_kubernetes_object_structure(
    {"apiVersion": "apps/v1", "kind": "Deployment", "metadata": {}}
)
```

## What it does not do

This is a library of pieces, not a controller. It does not talk to a
Kubernetes cluster, does not evaluate the expressions it finds, does not
build or order a dependency graph of resources, and does not generate or
install CRDs. It has no command-line entry point.

## Installation and tests

From a checkout of the project:

```
pip install -e ".[test]"
pytest
```