"""schemas: Trip, forecast and packing data types."""
