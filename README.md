# chartmigrate

Tools for maintaining kube-starrocks Helm chart values and a Markdown changelog.

## Installation

    pip install .

## Migrating values.yaml

Chart versions before v1.8.0 use a flat `values.yaml`:

    key1: value1
    key2: value2

From v1.8.0 on, the values are split into two sections:

    operator:
      key1: value1
    starrocks:
      key2: value2

`migrate-chart-value` converts a file from one layout to the other. Which
layout the input has is decided by whether it has an `operator` or a
`starrocks` key; which layout is wanted is decided by comparing
`--target-version` with `v1.8.0` as strings.

Upgrade to the new layout:

    migrate-chart-value --input values.yaml --target-version v1.8.0 --output values_v1.8.0.yaml

Downgrade to the old layout:

    migrate-chart-value --input values.yaml --target-version v1.7.1 --output values_v1.7.1.yaml

The options may also be written with a single dash (`-input`,
`-target-version`, `-output`). If `--input` is left out, the file is read from
standard input. If `--output` is left out, the result goes to standard output.
Progress messages go to standard error.

`--target-version` is required and must start with `v`; if it is missing or
does not start with `v`, the command prints a message and its help to standard
error and does nothing else. When the file already has the layout the target
version expects, nothing is written.

When upgrading, only these keys are kept:

- `operator`: `global`, `timeZone`, `nameOverride`, `starrocksOperator`
- `starrocks`: `nameOverride`, `initPassword`, `timeZone`, `datadog`,
  `starrocksCluster`, `starrocksFESpec`, `starrocksCnSpec`, `starrocksBeSpec`,
  `secrets`, `configMaps`, `feProxy`

`timeZone` and `nameOverride` go into both sections. If either is missing or
empty, it defaults to `Asia/Shanghai` and `kube-starrocks`. Keys are written
in sorted order, and multi-line strings as literal blocks.

When downgrading, the `operator` section must be a mapping (a `ValueError` is
raised otherwise); its `timeZone` and `nameOverride` are dropped, and it is
written followed by the `starrocks` section, both at the top level.

From Python:

    import io
    from chartmigrate.migrate import do

    out = io.StringIO()
    with open("values.yaml", encoding="utf-8") as source:
        do(source, "v1.8.0", out)
    print(out.getvalue())

`do(reader, target_version, writer)` reads all of `reader` (text or UTF-8
bytes) and writes text to `writer`. The helpers it uses are also public:
`write(writer, original_fields, keys, header)` writes the chosen keys under a
header, and `add_header(fields, header)` returns them as a YAML string.

## Linking PR numbers in a changelog

`changelog-pr-links` edits a Markdown file in place. Every `(#123)` becomes
`[#123](<base-url>/123)`:

    changelog-pr-links CHANGELOG.md --base-url https://git.example.com/project/pull

`--base-url` is required. If the path is left out, `../CHANGELOG.md` is
rewritten. The file is read and written as UTF-8.

The same rewrite is available from Python as
`chartmigrate.changelog_links.link_pr_numbers(text, base_url)`, which returns
the new text, and `rewrite_file(path, base_url)`, which rewrites a file.

## Tests

    pip install .[test]
    pytest