"""Character, string, memory, output and linked-list helpers."""