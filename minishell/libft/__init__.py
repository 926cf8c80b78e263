"""Character, string, memory, list, line-reading and formatted-output helpers."""