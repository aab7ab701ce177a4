import sys

from banjo_shapes import find_shape_connectors, generate_chord_shapes, get_movable_shape_info, get_tuning

tuning = get_tuning("Open G")
shapes = generate_chord_shapes("C", "MAJOR", tuning)

# Shapes are numbered along the neck
for shape in shapes:
    info = get_movable_shape_info(shape)
    name = info.description if info else shape.classification.name
    sys.stdout.write(f"{shape.relative_position}: {shape.frets} {name}\n")

# Shapes that repeat five frets higher
for connector in find_shape_connectors(shapes, tuning):
    sys.stdout.write(f"{connector.from_shape.frets} -> {connector.to_shape.frets}\n")
