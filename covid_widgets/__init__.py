# Dashboard widgets for pandemic case data
