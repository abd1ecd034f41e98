from poseidon_input import build_poseidon, build_record, write_record

# Password for the circuit input
password = 123456

# Compute the Poseidon hash (circomlib parameters)
poseidon = build_poseidon("bn254")
record = build_record(password, poseidon)

print("Password:", record.password)
print("Poseidon Hash (Decimal):", record.hash)
print("Poseidon Hash (Hex):", hex(int(record.hash)))

write_record(record, "input.json")
print("Updated input.json with correct hash")
