from em_fields import ElectricField, MagneticField, describe_field

e = ElectricField(0.0, 1e5, 1e3)
m = MagneticField(1e-4, 2e-4, 3e-4)

e.compute_field(charge=1e-6, distance=0.05)
m.compute_field(current=10.0, distance=0.05)

for f in (e, m):
    print(describe_field(f))

print(e + ElectricField(1e4, 2e4, 3e4))
print(m + MagneticField(2e-4, 3e-4, 1e-4))
