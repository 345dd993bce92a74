"""
Plain text rendering of the artifacts, in the spirit of readelf(1).

Nothing is decided here: the text is only a different view of what
generate() returned.
"""


def render_catalog(catalog):
    lines = ['Tables:', '  Id   Name']
    for entry in catalog:
        lines.append(f'  0x{entry.id:02x} {entry.name}')
    lines.append(f'  table count {catalog.table_count}, none is {catalog.none}')

    return lines


def render_widths(catalog, widths):
    lines = ['Record widths:']
    for entry in catalog:
        lines.append(f'  {entry.name:<24} {widths[entry.name]}')

    return lines


def render_plans(catalog, plans):
    lines = ['Decode plans:']
    for entry in catalog:
        lines.append(f'  {entry.name}')
        for step in plans[entry.name]:
            argument = step.argument
            if argument is None:
                argument = ''
            elif hasattr(argument, 'scheme'):
                argument = argument.scheme
            elif hasattr(argument, 'name'):
                argument = argument.name
            convert = f' as {step.convert.__name__}' if step.convert else ''
            lines.append(f'    {step.field:<24} {step.read.value}({argument}){convert}')

    return lines


def render_dispatch(dispatch):
    lines = ['Coded indexes:']
    for name in sorted(dispatch):
        lines.append(f'  {name}')
        for tag, entry in dispatch[name].items():
            lines.append(f'    {tag:>3} {entry.name}')

    return lines


def render_registry(registry):
    lines = ['Registry:']
    for entry in registry:
        lines.append(f'  0x{entry.id:02x} {entry.name}')

    return lines


def render(artifacts) -> str:
    sections = [
        render_catalog(artifacts.catalog),
        render_widths(artifacts.catalog, artifacts.widths),
        render_plans(artifacts.catalog, artifacts.plans),
        render_dispatch(artifacts.dispatch),
        render_registry(artifacts.registry),
    ]

    return '\n\n'.join('\n'.join(_) for _ in sections) + '\n'
