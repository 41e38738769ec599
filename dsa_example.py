#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from ecsig.ecc import ECDSA, LOW_CARD_CURVES, gen_keys
from ecsig.ecc import secp256k1 as ec
from ecsig.hashes import identity_digest

dsa = ECDSA(ec)

print("\n*** EC:")
print(ec)

print("\n0. Message to be signed")
msg1 = "Paolo is afraid of ephemeral random numbers"
print(msg1)

print("1. Key generation")
q, Q = gen_keys(ec, 0x18E14A7B6A307F426A94F8114701E7C8E774E7F9A47E2C2035DB29A206321725)
print(f"prvkey:    {hex(q).upper()}")
print(f"PubKey: {'02' if Q.y % 2 == 0 else '03'} {hex(Q.x).upper()}")


print("2. Sign message")
r1, s1 = dsa.sign(msg1, q)
print(f"    r1:    {hex(r1).upper()}")
print(f"    s1:    {hex(s1).upper()}")


print("3. Verify signature")
print(dsa.verify(msg1, Q, r1, s1))


print("\n** Malleated signature")
sm = ec.n - s1
print(f"    r1:    {hex(r1).upper()}")
print(f"    sm:    {hex(sm).upper()}")


print("** Verify malleated signature")
print(dsa.verify(msg1, Q, r1, sm))


print("\n0. Another message to sign, reusing the same nonce")
msg2 = "and Paolo is right to be afraid"
print(msg2)
k = 0x1B43A5F57C8E6D5E3F1D2C3B4A5968778695A4B3C2D1E0F0E1D2C3B4A5968778
r2, s2 = dsa.sign(msg2, q, k)
r1, s1 = dsa.sign(msg1, q, k)
print(f"    r1:    {hex(r1).upper()}")
print(f"    r2:    {hex(r2).upper()}")


print("4. Recover the private key")
q_cracked, k_cracked = dsa.crack_prv_key(msg1, (r1, s1), msg2, (r2, s2))
print(f"prvkey:    {hex(q_cracked).upper()}")
print(f"nonce:     {hex(k_cracked).upper()}")
print(q_cracked == q and k_cracked == k)


print("\n*** Low cardinality EC, identity digest:")
ec23_31 = LOW_CARD_CURVES["ec23_31"]
print(ec23_31)
toy = ECDSA(ec23_31, identity_digest)
Q = toy.pubkey(5)
sig = toy.sign(10, 5, 7)
print(f"PubKey: {Q}")
print(f"sig:    {sig}")
print(toy.verify(10, Q, *sig))
