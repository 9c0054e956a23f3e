"""Protocol layer: opcode table, frame builders, filter resolution, wire codec."""
